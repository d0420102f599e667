import logging

from flask import Flask, jsonify, request
from securepass.errors import InvalidRequest, RandomSourceUnavailable
from securepass.generator import GenerationRequest, DEFAULT_LENGTH, generate_many
from securepass.policy import check_policy
from securepass.score import score_password

logger = logging.getLogger(__name__)

CLASS_OPTIONS = ("lowercase", "uppercase", "numbers", "symbols")
POLICY_FLAGS = ("require_lowercase", "require_uppercase",
                "require_numbers", "require_symbols")


def _json_body():
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise InvalidRequest("request body must be a JSON object")
    return data


def _bool_field(data, key, default=True):
    value = data.get(key, default)
    if not isinstance(value, bool):
        raise InvalidRequest(f"{key} must be a boolean")
    return value


def _password_field(data):
    password = data.get('password', '')
    if not isinstance(password, str):
        raise InvalidRequest("password must be a string")
    return password


def create_app():
    app = Flask(__name__)

    @app.errorhandler(InvalidRequest)
    def invalid_request(e):
        return jsonify({'error': str(e)}), 400

    @app.errorhandler(RandomSourceUnavailable)
    def random_unavailable(e):
        logger.error("secure random source unavailable: %s", e)
        return jsonify({'error': str(e)}), 503

    @app.route('/')
    def home():
        return jsonify({
            "message": "SecurePass API is running"
        })

    @app.route('/generate', methods=['POST'])
    def generate_route():
        data = _json_body()
        flags = {key: _bool_field(data, key) for key in CLASS_OPTIONS}
        options = GenerationRequest(length=data.get('length', DEFAULT_LENGTH), **flags)
        passwords = generate_many(data.get('count', 1), options)
        return jsonify({
            'passwords': passwords,
            'strengths': [score_password(pw)._asdict() for pw in passwords],
        })

    @app.route('/score', methods=['POST'])
    def score_route():
        data = _json_body()
        result = score_password(_password_field(data))
        return jsonify(result._asdict())

    @app.route('/policy', methods=['POST'])
    def policy_route():
        data = _json_body()
        options = {k: _bool_field(data, k) for k in POLICY_FLAGS if k in data}
        if 'min_length' in data:
            min_length = data['min_length']
            if isinstance(min_length, bool) or not isinstance(min_length, int):
                raise InvalidRequest("min_length must be an integer")
            options['min_length'] = min_length
        result = check_policy(_password_field(data), **options)
        return jsonify(result._asdict())

    return app


app = create_app()

if __name__ == "__main__":
    app.run(debug=True)
