"""Check-in Desk package.

This package is organized by feature modules (roster, attendance, sessions,
reports) with a thin Flask controller layer over service/repository layers.
"""
