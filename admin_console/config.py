"""
Configuration settings for the Blog Admin Console
"""
import os


class Config:
    """Flask application configuration"""
    
    # Flask secret key for sessions (the auth session lives in the signed cookie)
    SECRET_KEY = os.environ.get('SECRET_KEY') or 'dev-secret-key-change-in-production-12345'
    
    # Database configuration
    basedir = os.path.abspath(os.path.dirname(os.path.dirname(__file__)))
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL') or \
        'sqlite:///' + os.path.join(basedir, 'instance', 'blog_admin.db')
    SQLALCHEMY_TRACK_MODIFICATIONS = False
    
    # Supabase project (placeholders until set in the environment)
    SUPABASE_URL = os.environ.get('SUPABASE_URL') or 'http://localhost:54321'
    SUPABASE_ANON_KEY = os.environ.get('SUPABASE_ANON_KEY') or 'YOUR_ANON_KEY_HERE'
    AUTH_STORAGE_KEY = os.environ.get('AUTH_STORAGE_KEY') or 'supabase.auth.token'
    
    # Admin authorization: 'allow_list' (demo) or 'table' (admin_users lookup)
    ADMIN_POLICY = os.environ.get('ADMIN_POLICY') or 'allow_list'
    ADMIN_EMAILS = [
        e.strip() for e in (os.environ.get('ADMIN_EMAILS') or 'admin@example.com,admin').split(',')
        if e.strip()
    ]
    
    LOG_LEVEL = os.environ.get('LOG_LEVEL') or 'INFO'


class TestConfig(Config):
    """Testing configuration"""
    TESTING = True
    SQLALCHEMY_DATABASE_URI = 'sqlite:///:memory:'
    SUPABASE_URL = 'http://supabase.test'
    SUPABASE_ANON_KEY = 'test-anon-key'
