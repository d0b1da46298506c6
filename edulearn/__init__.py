import sys
from flask import Flask
from flask_bcrypt import Bcrypt
from flask_sqlalchemy import SQLAlchemy
from config import Config

db = SQLAlchemy()
bcrypt = Bcrypt()


def create_app(config_class=Config):
    app = Flask(__name__)
    app.config.from_object(config_class)

    db.init_app(app)
    bcrypt.init_app(app)

    # Register models on the metadata before anything calls create_all()
    from edulearn import models  # noqa: F401

    @app.cli.command('seed')
    def seed_command():
        """Populate the database with EduLearn demo data."""
        from seed import main
        status = main(app)
        if status:
            sys.exit(status)

    return app
