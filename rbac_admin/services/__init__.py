# rbac_admin/services/__init__.py
from .base import GenericService
from .activation_service import ActivationService
from .person_service import PersonService
from .user_service import UserService
from .rol_service import RolService
from .form_service import FormService
from .module_service import ModuleService
from .user_rol_service import UserRolService
from .rol_form_service import RolFormService
from .form_module_service import FormModuleService
from .factory import ServiceFactory
