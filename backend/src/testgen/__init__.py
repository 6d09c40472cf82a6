"""Testgen: JUnit 5 + Mockito test scaffolding for Java service classes."""

__version__ = "0.1.0"
