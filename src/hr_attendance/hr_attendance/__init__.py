"""HR Attendance rules package.

Pure business rules (workday classification, overtime windows, approval
eligibility, attendance actions, payroll aggregation) live in ``rules`` and
``payroll``; feature modules (attendance, payroll) wrap them with thin
service/repository layers.
"""
