"""
Provisioning module - first-time container setup and package installation
"""

from workstation.provisioning.packages import PackageInstaller
from workstation.provisioning.setup import Provisioner
from workstation.provisioning.steps import Step, StepResult, StepRunner, StepStatus

__all__ = [
    "PackageInstaller",
    "Provisioner",
    "Step",
    "StepResult",
    "StepRunner",
    "StepStatus",
]
