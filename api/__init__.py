# api/__init__.py

def register_routes(app, limiter=None):
    # import API blueprints (lazy import)
    from api.routes.insurance_routes import bp as insurance_bp
    from api.routes.main_routes import main_bp
    from api.routes.risk_routes import bp as risk_bp

    if limiter is not None:
        # must be applied before the blueprint is registered
        limiter.limit("100/minute")(risk_bp)

    app.register_blueprint(main_bp)
    app.register_blueprint(insurance_bp, url_prefix="/api/insurance")
    app.register_blueprint(risk_bp, url_prefix="/api/risk")
