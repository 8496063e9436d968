"""Logging and error handling helpers"""
