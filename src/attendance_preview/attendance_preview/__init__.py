"""Attendance Preview package.

Advisory check-in/check-out window evaluation and pay preview, organized by
feature modules (attendance, payroll) with a thin Flask controller layer.
"""
