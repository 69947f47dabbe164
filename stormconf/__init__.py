"""
stormconf

Configuration schema, validation and layered composition for distributed
stream-processing topologies.

Author: stormconf Project
License: MIT
"""

__version__ = "0.1.0"
