# app.py
from flask import Flask, jsonify, request
import json
import time
import os
from sqlalchemy.exc import OperationalError

import config as cfg
from run_eps import map_db_to_case, run_resolution
from eps_config import ConfigConflictError
from models import db, EpsCase, EpsResult


def create_app(db_url=None):
    app = Flask(__name__)

    if not db_url:
        db_url = os.environ.get('DATABASE_URL', cfg.DATABASE_URL)

    app.config['SQLALCHEMY_DATABASE_URI'] = db_url
    app.config['SQLALCHEMY_TRACK_MODIFICATIONS'] = False

    db.init_app(app)

    with app.app_context():
        retries = cfg.DB_RETRIES
        while retries > 0:
            try:
                db.create_all()
                print("--- Database Tables Checked/Created Successfully ---")
                break
            except OperationalError:
                retries -= 1
                print(f"Database not ready yet... Retrying in {cfg.DB_RETRY_WAIT} seconds ({retries} left)")
                time.sleep(cfg.DB_RETRY_WAIT)
        if retries == 0:
            print(f"Error: Could not connect to Database after {cfg.DB_RETRIES} attempts.")

    register_routes(app)
    return app


def register_routes(app):

    @app.route('/')
    def home():
        return jsonify({
            "status": "Server is Running",
            "message": "Endpoint scaling resolver ready"
        })

    @app.route('/api/eps', methods=['POST'])
    def resolve_case_api():
        data = request.get_json(silent=True)
        if not data or 'deck' not in data:
            return jsonify({"error": "request body must be JSON with a 'deck' object"}), 400
        material = data.get('material') or {}
        if not isinstance(data['deck'], dict) or not isinstance(material, dict):
            return jsonify({"error": "'deck' and 'material' must be JSON objects"}), 400

        new_case = None
        try:
            new_case = EpsCase(
                name=data.get('name', 'Unnamed Case'),
                status='running',
                deck_json=json.dumps(data['deck']),
                bc_pe=material.get('pe', cfg.BC_PE),
                bc_alpha=material.get('alpha', cfg.BC_ALPHA),
                pc_low_sw=material.get('pc_low_sw', cfg.PC_LOW_SW),
                krn_low_sw=material.get('krn_low_sw', cfg.KRN_LOW_SW),
                krw_high_sw=material.get('krw_high_sw', cfg.KRW_HIGH_SW))
            db.session.add(new_case)
            db.session.commit()
            print(f"Case saved with ID: {new_case.id}")

            case = map_db_to_case(new_case)
            try:
                results = run_resolution(case)
            except ConfigConflictError as e:
                new_case.status = 'failed'
                new_case.error = str(e)
                db.session.commit()
                return jsonify({"error": str(e), "case_id": new_case.id, "status": "failed"}), 409

            for system, directions in results.items():
                if system == 'material':
                    continue
                for direction, eps in directions.items():
                    if eps is None:
                        continue
                    db.session.add(EpsResult(
                        case_id=new_case.id,
                        system=system,
                        direction=direction,
                        flags_json=json.dumps(eps.as_dict())))
            new_case.status = 'completed'
            db.session.commit()
            return jsonify({"message": "endpoint scaling resolved successfully",
                            "case_id": new_case.id,
                            "status": "completed"}), 201

        except Exception as e:
            db.session.rollback()
            if new_case is not None and new_case.id is not None:
                new_case.status = 'failed'
                new_case.error = str(e)
                db.session.commit()
            print(f"Resolution Error: {e}")
            return jsonify({"error": str(e)}), 500

    @app.route("/api/eps/<int:case_id>", methods=["GET"])
    def get_results(case_id):
        try:
            case = db.session.get(EpsCase, case_id)
            if not case:
                return jsonify({"error": "Case not found"}), 404

            results = EpsResult.query.filter_by(case_id=case_id).order_by(EpsResult.id).all()
            output = {
                "case_id": case.id,
                "case_name": case.name,
                "status": case.status,
                "error": case.error,
                "deck": json.loads(case.deck_json),
                "material": {
                    "pe": case.bc_pe, "alpha": case.bc_alpha,
                    "pc_low_sw": case.pc_low_sw,
                    "krn_low_sw": case.krn_low_sw,
                    "krw_high_sw": case.krw_high_sw,
                },
                "systems": {}
            }
            for res in results:
                output["systems"].setdefault(res.system, {})[res.direction] = json.loads(res.flags_json)
            return jsonify(output), 200
        except Exception as e:
            print(f"Error fetching results: {e}")
            return jsonify({"error": str(e)}), 500


if __name__ == '__main__':
    app = create_app()
    app.run(debug=True, port=5000, host='0.0.0.0')
