from flask import Flask
from flasgger import Swagger

from .config import Config
from .core.ballot import ballot, Clock
from .errors import register_error_handlers
from .extensions import db, migrate
from .middleware.request_id import configure_logging, init_request_id
from .swagger_config import swagger_template


def create_app(config_class=Config, clock: Clock | None = None) -> Flask:
    app = Flask(__name__)
    app.config.from_object(config_class)
    configure_logging(app)

    Swagger(app, template=swagger_template(app))

    # Extensions
    db.init_app(app)
    migrate.init_app(app, db)
    ballot.init_app(app, session=db.session, clock=clock)

    # Middleware + errors
    init_request_id(app)
    register_error_handlers(app)

    # Blueprint imports
    from .api.voting.routes import voting_bp
    from .api.admin.routes import admin_bp

    # Blueprints
    app.register_blueprint(voting_bp, url_prefix="/api")
    app.register_blueprint(admin_bp, url_prefix="/api/admin")

    # Health check
    @app.get("/health")
    def health():
        return {"status": "ok"}, 200

    return app
