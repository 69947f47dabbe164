"""
stormconf Utilities

Author: stormconf Project
License: MIT
"""
