"""DMS attendance package.

Organized by feature modules (students, attendance, notifications, ...) with a
thin Flask controller layer over service/repository layers.
"""
