"""
portfolio — backend API for a personal portfolio site.

Public read endpoints (projects, content sections) and a contact form, plus a
small admin panel API guarded by a single owner login.

Data model: Project, ContentSection, AdminUser, Message. No cross references
between collections.
"""
