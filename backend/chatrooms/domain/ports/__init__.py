"""
PORTS - Interfaces the domain needs, implemented by the infrastructure layer.
"""
