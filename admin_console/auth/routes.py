"""
Auth Routes

Admin login and logout. The SessionProvider does the work and posts the
user-facing notifications; these views only pick the next page.
"""

from urllib.parse import urlparse

from flask import render_template, request, redirect, url_for, flash
from admin_console.auth import auth_bp
from admin_console.auth.provider import use_auth


def _safe_next(target):
    """Only follow relative redirects back into the console."""
    if not target:
        return None
    parsed = urlparse(target)
    if parsed.scheme or parsed.netloc or not target.startswith('/'):
        return None
    return target


@auth_bp.route('/login', methods=['GET', 'POST'])
def login():
    """Admin login page"""
    auth = use_auth()
    next_page = _safe_next(request.args.get('next'))
    
    if auth.is_authenticated and auth.check_admin_status():
        return redirect(next_page or url_for('blog.list_posts'))
    
    if request.method == 'POST':
        email = request.form.get('email', '').strip()
        password = request.form.get('password', '')
        
        if not email or not password:
            flash('Please enter both email and password.', 'danger')
            return render_template('auth/login.html', email=email), 400
        
        result = auth.login(email, password)
        if result.success:
            return redirect(next_page or url_for('blog.list_posts'))
        return render_template('auth/login.html', email=email), 401
    
    return render_template('auth/login.html')


@auth_bp.route('/logout')
def logout():
    """Admin logout"""
    use_auth().logout()
    return redirect(url_for('auth.login'))
