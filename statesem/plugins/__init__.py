"""
Reference collaborators: a configuration-set lattice and the assembly that
interprets it.
"""

from .assembly import Assembly
from .configuration_lattice import ConfigurationSet, Submachine, SubmachineTransition

__all__ = ["Assembly", "ConfigurationSet", "Submachine", "SubmachineTransition"]
