"""
Module: core

Purpose:
    Shared data model for the canvas paginator. Everything here is an
    immutable value created fresh for each pagination run.
"""
