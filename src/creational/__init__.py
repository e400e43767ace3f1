"""Creational design patterns: abstract factory and factory method."""
