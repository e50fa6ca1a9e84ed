"""
Workstation

Provisions and controls a single Docker container used as a personal
remote desktop workstation (VNC + XFCE + Firefox).
"""

__version__ = "1.0.0"
__license__ = "MIT"
