"""
The MODEL layer contains the geometric value types and the distance engine.
It has NO knowledge of the console or of how points are collected.
"""
