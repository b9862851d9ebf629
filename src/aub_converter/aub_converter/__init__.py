"""AUB Converter package.

Turns tab-separated biometric attendance logs into the fixed-column AUB
format consumed by payroll. Organized by feature modules (records,
formatting, conversion) with a thin Flask controller layer on top of plain
service classes.
"""
