# models.py
from flask_sqlalchemy import SQLAlchemy
from datetime import datetime

import config as cfg


db = SQLAlchemy()


class EpsCase(db.Model):
    __tablename__ = 'eps_cases'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(100), nullable=False)
    created_at = db.Column(db.DateTime, default=datetime.utcnow)
    status = db.Column(db.String(20), default='pending')

    # Deck keywords and fields as submitted
    deck_json = db.Column(db.Text, nullable=False)

    bc_pe = db.Column(db.Float, default=cfg.BC_PE)
    bc_alpha = db.Column(db.Float, default=cfg.BC_ALPHA)
    pc_low_sw = db.Column(db.Float, default=cfg.PC_LOW_SW)
    krn_low_sw = db.Column(db.Float, default=cfg.KRN_LOW_SW)
    krw_high_sw = db.Column(db.Float, default=cfg.KRW_HIGH_SW)

    error = db.Column(db.Text)

    results = db.relationship('EpsResult', backref='case', lazy=True)

    def __repr__(self):
        return f"<Case {self.id}: {self.name}>"


class EpsResult(db.Model):
    __tablename__ = 'eps_results'

    id = db.Column(db.Integer, primary_key=True)

    case_id = db.Column(db.Integer, db.ForeignKey('eps_cases.id'), nullable=False)

    system = db.Column(db.String(20), nullable=False)     # gas_oil / oil_water / gas_water
    direction = db.Column(db.String(20), nullable=False)  # drainage / imbibition

    flags_json = db.Column(db.Text)

    def __repr__(self):
        return f"<Result Case:{self.case_id} {self.system}/{self.direction}>"
