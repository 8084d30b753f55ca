"""Attendance Overtime package.

Feature modules (shifts, attendance, payroll) compute regular and overtime
minutes against department shift windows, behind a thin Flask controller
layer and small service/repository layers.
"""
