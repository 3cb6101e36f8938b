from .step_01_check_root import CheckRootStep
from .step_02_check_internet import CheckInternetStep
from .step_03_install_system_packages import InstallSystemPackagesStep
from .step_04_clone_repository import CloneRepositoryStep
from .step_05_install_python_requirements import InstallPythonRequirementsStep
from .step_06_add_user_to_group import AddUserToGroupStep
from .step_07_setup_systemd_service import SetupSystemdServiceStep
from .step_08_enable_service import EnableServiceStep
from .step_09_start_service import StartServiceStep
from .step_10_check_service_status import CheckServiceStatusStep

__all__ = [
    "CheckRootStep",
    "CheckInternetStep",
    "InstallSystemPackagesStep",
    "CloneRepositoryStep",
    "InstallPythonRequirementsStep",
    "AddUserToGroupStep",
    "SetupSystemdServiceStep",
    "EnableServiceStep",
    "StartServiceStep",
    "CheckServiceStatusStep",
]
