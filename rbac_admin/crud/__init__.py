# rbac_admin/crud/__init__.py

# Repositorios disponibles desde el paquete 'crud'
from .base import GenericRepository
from .activation import ActivationRepository
from .crud_user import UserRepository
from .crud_user_rol import UserRolRepository
from .crud_rol_form import RolFormRepository
from .crud_form_module import FormModuleRepository
from .factory import RepositoryFactory, DEFAULT_REPOSITORIES
