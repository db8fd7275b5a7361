"""
Application Layer for the Treino API.

This package contains:
- ports/: Abstract repository interfaces (what the domain needs)
- use_cases/: Application services coordinating domain logic and ports
- exceptions.py: Errors shared by use cases and routers
"""
