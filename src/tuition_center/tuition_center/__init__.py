"""Tuition Center package.

Scheduling, billing-cycle and fee-policy engine for a tuition center,
organized by feature modules (schedules, billing, attendance, settings, ...)
with a thin Flask controller layer over service/repository layers.
"""
