from flask import Blueprint, request, jsonify, render_template, redirect, url_for, current_app
from flask_jwt_extended import create_access_token, jwt_required, get_jwt_identity, set_access_cookies
from flask_cors import cross_origin
from sqlalchemy.exc import SQLAlchemyError
from ..models import User, db

auth_bp = Blueprint('auth', __name__)

@auth_bp.route('/api/auth/register', methods=['POST', 'OPTIONS'])
@cross_origin(supports_credentials=True)
def register():
    if request.method == 'OPTIONS':
        return '', 200

    data = request.get_json(silent=True)

    if not data or not data.get('email') or not data.get('password') or not data.get('username'):
        return jsonify({'message': 'Missing required fields'}), 400

    if User.query.filter_by(email=data['email']).first():
        return jsonify({'message': 'Email already exists'}), 400

    if User.query.filter_by(username=data['username']).first():
        return jsonify({'message': 'Username already exists'}), 400

    new_user = User(
        username=data['username'],
        email=data['email'],
        password=data['password'],
        name=data.get('name')
    )

    try:
        db.session.add(new_user)
        db.session.commit()
    except SQLAlchemyError as e:
        db.session.rollback()
        current_app.logger.error('Error registering user: %s', str(e))
        return jsonify({'message': 'Database error occurred'}), 500

    access_token = create_access_token(identity=str(new_user.id))

    return jsonify({
        'message': 'User created successfully',
        'token': access_token,
        'user': new_user.to_dict()
    }), 201

@auth_bp.route('/api/auth/login', methods=['POST', 'OPTIONS'])
@cross_origin(supports_credentials=True)
def login():
    if request.method == 'OPTIONS':
        return '', 200

    data = request.get_json(silent=True)

    if not data or not data.get('email') or not data.get('password'):
        return jsonify({'message': 'Missing email or password'}), 400

    user = User.query.filter_by(email=data['email']).first()

    if not user or not user.check_password(data['password']):
        return jsonify({'message': 'Invalid email or password'}), 401

    access_token = create_access_token(identity=str(user.id))

    response = jsonify({
        'message': 'Logged in successfully',
        'token': access_token,
        'user': user.to_dict()
    })
    set_access_cookies(response, access_token)
    return response, 200

@auth_bp.route('/api/auth/me', methods=['GET'])
@jwt_required()
def get_user():
    current_user_id = get_jwt_identity()
    user = db.session.get(User, int(current_user_id))

    if not user:
        return jsonify({'message': 'User not found'}), 404

    return jsonify({
        'message': 'Profile retrieved successfully',
        'user': user.to_dict()
    }), 200

@auth_bp.route('/login', methods=['GET'])
def login_form():
    return render_template('login.html', error=None)

@auth_bp.route('/login', methods=['POST'])
def login_submit():
    email = request.form.get('email', '')
    password = request.form.get('password', '')

    user = User.query.filter_by(email=email).first()
    if not user or not user.check_password(password):
        current_app.logger.info('Failed sign-in for %s', email)
        return render_template('login.html', error='Invalid email or password'), 401

    current_app.logger.info('User %s signed in', user.id)
    response = redirect(url_for('dashboard.dashboard'))
    set_access_cookies(response, create_access_token(identity=str(user.id)))
    return response
