"""Road Dodge: steer up and down, avoid the obstacles, stay on the road."""

__version__ = "0.5.0"
