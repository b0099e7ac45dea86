"""
Design pattern catalogue: demos, catalogue registry and runner infrastructure
"""
