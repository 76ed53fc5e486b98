"""
models/ - Domain Models
=======================
Plain dataclasses passed between repositories, services and callers.
"""
