from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import jwt_required

from ..sources import RECORD_TYPES, simulated_sources
from ..views import load, Failure

records_bp = Blueprint('records', __name__)

@records_bp.route('/<collection>', methods=['GET'])
@jwt_required()
async def list_records(collection):
    """Serve one dashboard collection as JSON"""
    if collection not in RECORD_TYPES:
        return jsonify({
            'status': 'error',
            'message': f'Unknown collection: {collection}'
        }), 404

    source = simulated_sources(current_app.config['SIMULATED_LATENCY'])[collection]
    result = await load(source, f'Failed to load {collection}')

    if isinstance(result, Failure):
        current_app.logger.error('Error serving %s: %s', collection, result.message)
        return jsonify({
            'status': 'error',
            'message': result.message
        }), 502

    return jsonify({
        'status': 'success',
        'items': [record.to_dict() for record in result.records]
    }), 200
