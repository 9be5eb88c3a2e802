# rbac_admin/models/__init__.py

# Capacidades opcionales de las entidades
from .mixins import Activatable, Auditable, AUDIT_FIELDS

# Entidades principales
from .person import Person
from .user import User
from .rol import Rol
from .form import Form
from .module import Module

# Tablas de unión (M-M)
from .user_rol import UserRol
from .rol_form import RolForm
from .form_module import FormModule

# Las importaciones de arriba bastan para que Base.metadata conozca todas las tablas.
