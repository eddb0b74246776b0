"""Nomina: organization, payroll and employee hierarchy service."""

__version__ = "0.1.0"
