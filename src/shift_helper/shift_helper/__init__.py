"""Shift Helper package.

This package is organized by feature modules (employees, shifts, presets, ...)
with a thin Flask controller layer over service/repository layers backed by
Supabase tables.
"""
