"""HR Admin package.

This package is organized by feature modules (attendance, employees)
with a thin Flask controller layer over service/repository layers backed by MongoDB.
"""
