"""
Core Domain Layer - O Hexágono.

Este pacote contém a lógica pura do portal, sem dependências de frameworks.
Características:
- Zero dependências externas (Django, Celery, etc.)
- Validação declarativa de formulários e extração de IDs do YouTube
- Persistência, autenticação e arquivos acessados apenas via Ports
"""
