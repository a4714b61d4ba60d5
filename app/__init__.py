from flask import Flask
from flask_wtf.csrf import CSRFProtect
from dotenv import load_dotenv
import os
import markdown
import logging

load_dotenv()

csrf = CSRFProtect()

def create_app(test_config=None):
    # Validate required environment variables
    required_vars = ['SECRET_KEY']
    for var in required_vars:
        if not os.getenv(var):
            raise ValueError(f"Required environment variable {var} is not set")

    app = Flask(__name__)
    app.config.from_object('config')
    if test_config:
        app.config.update(test_config)

    # Configure logging
    logging.basicConfig(
        level=app.config.get('LOG_LEVEL', 'INFO'),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    # Jinja2 whitespace control from config
    app.jinja_env.trim_blocks = app.config.get('JINJA2_TRIM_BLOCKS', False)
    app.jinja_env.lstrip_blocks = app.config.get('JINJA2_LSTRIP_BLOCKS', False)

    # Initialize extensions
    csrf.init_app(app)

    # Register blueprints
    from app.routes.main import main_bp
    from app.routes.calculators import calculators_bp
    from app.routes.api import api_bp
    from app.learning_hub.routes import learning_hub_bp

    app.register_blueprint(main_bp)
    app.register_blueprint(calculators_bp, url_prefix='/category')
    app.register_blueprint(api_bp, url_prefix='/api')
    app.register_blueprint(learning_hub_bp, url_prefix='/learning-hub')

    # JSON API clients don't carry a CSRF token
    csrf.exempt(api_bp)

    # CLI: flask calculators ...
    from app.commands import calculators_cli
    app.cli.add_command(calculators_cli)

    # Template filters
    from app.calculators.formatting import format_currency, format_number, format_output, format_percent

    @app.template_filter('markdown')
    def markdown_filter(text):
        return markdown.markdown(text, extensions=['fenced_code', 'tables'])

    app.add_template_filter(format_currency, 'currency')
    app.add_template_filter(format_percent, 'percent')
    app.add_template_filter(format_number, 'number')
    app.add_template_filter(format_output, 'output')

    @app.context_processor
    def inject_site():
        from app.calculators.registry import get_all_categories
        return {
            'site_name': app.config['SITE_NAME'],
            'site_url': app.config['SITE_URL'],
            'nav_categories': get_all_categories(),
        }

    return app
