"""Shared Kernel module.

This module contains foundational components that are explicitly shared across
the community and mentoring bounded contexts: the error taxonomy, its HTTP
translation and access token handling. Changes here affect both contexts and
should be carefully coordinated.
"""
