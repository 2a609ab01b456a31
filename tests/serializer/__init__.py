"""
Tests for the serializers and the decorators that put them
between the views and the outside world.
"""
