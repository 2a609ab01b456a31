"""
Houses the tests for the repositories, checked directly rather than through the service.
"""
