#!/usr/bin/env python
"""
Setup rápido para desenvolvimento local.

Este script:
1. Configura Django settings (SQLite se não houver DATABASE_*)
2. Executa migrations
3. Cria um admin do painel (opcional)
4. Cria matérias de exemplo (opcional)

Uso:
    python scripts/quick_setup.py
    python scripts/quick_setup.py --admin admin@example.com --password Passw0rd
    python scripts/quick_setup.py --with-sample-data
"""

import os
import sys
import argparse

# Raiz do projeto no path para importar o pacote src
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))


def setup_django():
    """Configura Django para uso standalone."""
    os.environ.setdefault('DJANGO_SETTINGS_MODULE', 'src.config.settings')

    import django
    django.setup()


def run_migrations():
    from django.core.management import call_command

    print("📦 Executando migrations...")
    call_command('migrate', verbosity=1)
    print("✅ Migrations concluídas!")


def create_admin(email: str, password: str):
    """Cria (ou promove) o usuário admin com acesso ao painel /manage/."""
    from django.contrib.auth import get_user_model

    User = get_user_model()
    user, created = User.objects.get_or_create(
        username=email.lower(),
        defaults={'email': email, 'first_name': 'Admin'},
    )
    user.is_staff = True
    user.is_superuser = True
    user.set_password(password)
    user.save()

    print(f"👤 Admin {'criado' if created else 'atualizado'}: {email}")


def create_sample_data():
    """Cria matérias pelo mesmo use case usado no painel."""
    from src.config.container import get_container
    from src.core.shared.exceptions import DomainException

    service = get_container().create_subject_service()

    sample_subjects = [
        {'name': 'Mathematics', 'description': 'Algebra, geometry and calculus notes.'},
        {'name': 'Physics', 'description': 'Mechanics, waves and electromagnetism.'},
        {'name': 'Chemistry', 'description': 'Organic and inorganic chemistry.'},
        {'name': 'History', 'description': ''},
    ]

    print("📝 Criando matérias de exemplo...")

    for data in sample_subjects:
        try:
            subject = service.execute(data)
            print(f"   ✓ {subject.name}")
        except DomainException as e:
            print(f"   - {data['name']}: {e.message}")


def check_connection():
    from django.db import connection

    print("🔍 Verificando conexão com o banco...")

    try:
        with connection.cursor() as cursor:
            cursor.execute("SELECT 1")
        print("✅ Conexão OK!")
        return True
    except Exception as e:
        print(f"❌ Erro de conexão: {e}")
        return False


def show_info():
    from django.conf import settings

    print("\n" + "=" * 60)
    print("📊 Informações do Setup")
    print("=" * 60)
    print(f"  Database Engine: {settings.DATABASES['default']['ENGINE']}")
    print(f"  Database Name: {settings.DATABASES['default']['NAME']}")
    print(f"  Media Root: {settings.MEDIA_ROOT}")
    print(f"  Debug Mode: {settings.DEBUG}")
    print("=" * 60)
    print("\n🚀 Próximos passos:")
    print("   1. django-admin runserver --settings=src.config.settings --pythonpath=.")
    print("   2. Acesse: http://localhost:8000/")
    print("   3. Painel: http://localhost:8000/manage/")
    print("\n")


def main():
    parser = argparse.ArgumentParser(description='Setup rápido para desenvolvimento')
    parser.add_argument(
        '--with-sample-data',
        action='store_true',
        help='Criar matérias de exemplo'
    )
    parser.add_argument(
        '--check-only',
        action='store_true',
        help='Apenas verificar conexão'
    )
    parser.add_argument('--admin', help='E-mail do admin do painel')
    parser.add_argument('--password', default='Passw0rd', help='Senha do admin')

    args = parser.parse_args()

    print("\n" + "=" * 60)
    print("🔧 Study Portal - Quick Setup")
    print("=" * 60 + "\n")

    setup_django()

    if args.check_only:
        check_connection()
        return

    if not check_connection():
        print("\n⚠️  Certifique-se de que o banco de dados está rodando.")
        print("   Sem DATABASE_URL/DATABASE_NAME o projeto usa SQLite.")
        return

    run_migrations()

    if args.admin:
        create_admin(args.admin, args.password)

    if args.with_sample_data:
        create_sample_data()

    show_info()


if __name__ == '__main__':
    main()
