"""
Database Base Module

Holds the Flask-SQLAlchemy instance shared by the models. Kept in its own
module so models and services can import it without importing the app.
"""

from flask_sqlalchemy import SQLAlchemy

# Bound to the Flask app in app.py via db.init_app()
db = SQLAlchemy()
