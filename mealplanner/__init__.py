"""Meal planning toolkit."""
