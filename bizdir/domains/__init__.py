"""Domain layer: business data types and pure display logic.

Keep domains free of UI and network concerns.
"""
