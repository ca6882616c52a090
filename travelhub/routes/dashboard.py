from flask import Blueprint, request, render_template, redirect, url_for, current_app, abort
from flask_jwt_extended import jwt_required, get_jwt_identity, create_access_token, unset_jwt_cookies

from ..session import session_for_request
from ..shell import DashboardShell, UnknownTabError, DEFAULT_TAB
from ..sources import build_sources

dashboard_bp = Blueprint('dashboard', __name__)

@dashboard_bp.before_request
def log_request_info():
    current_app.logger.info('Request Method: %s', request.method)
    current_app.logger.info('Request Path: %s', request.path)

def _forwarded_headers():
    # Remote dashboard APIs are called on behalf of the signed-in user
    if not current_app.config.get('DASHBOARD_API_URL'):
        return None
    token = create_access_token(identity=get_jwt_identity())
    return {'Authorization': f'Bearer {token}'}

def _build_shell(tab, on_logout=None):
    session = session_for_request(on_logout)
    if session is None:
        return None

    sources = build_sources(current_app.config, headers=_forwarded_headers())
    try:
        return DashboardShell(session, sources, active_tab=tab)
    except UnknownTabError:
        current_app.logger.info('Unknown dashboard tab requested: %s', tab)
        abort(404)

@dashboard_bp.route('/', methods=['GET'])
@dashboard_bp.route('/dashboard', methods=['GET'])
@jwt_required()
def dashboard():
    shell = _build_shell(request.args.get('tab', DEFAULT_TAB))
    if shell is None:
        return redirect(url_for('auth.login_form'))

    # The page ships the loading state; the browser swaps in the fragment
    return render_template('dashboard.html', shell=shell, view=shell.create_view())

@dashboard_bp.route('/dashboard/views/<tab>', methods=['GET'])
@jwt_required()
async def view_fragment(tab):
    shell = _build_shell(tab)
    if shell is None:
        return redirect(url_for('auth.login_form'))

    view = shell.mount_active_view()
    try:
        await view.settle()
        return view.render()
    finally:
        view.unmount()

@dashboard_bp.route('/logout', methods=['POST'])
@jwt_required()
def logout():
    response = redirect(url_for('auth.login_form'))
    session = session_for_request(on_logout=lambda: unset_jwt_cookies(response))

    if session is None:
        unset_jwt_cookies(response)
        return response

    # Signing out never loads a view, so the shell gets no data sources
    DashboardShell(session, {}).sign_out()
    return response
