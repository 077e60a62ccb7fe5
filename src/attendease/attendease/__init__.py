"""Attendease package.

This package is organized by feature modules (academics, teachers, students,
attendance, reports, ...) with a thin Flask JSON controller layer on top of
service/repository layers.
"""
