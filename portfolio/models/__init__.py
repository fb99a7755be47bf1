from .enums import AdminRole as AdminRole, ContentKey as ContentKey
from .admin_users import AdminUser as AdminUser
from .projects import Project as Project
from .content_sections import ContentSection as ContentSection
from .messages import Message as Message
