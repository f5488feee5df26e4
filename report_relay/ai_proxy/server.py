import os
from flask import Flask
from report_relay.config import load_settings
from report_relay.ai_proxy.routes import ai_proxy_bp

app = Flask(__name__)
app.config.update(load_settings())
app.register_blueprint(ai_proxy_bp, url_prefix="/api")

if __name__ == "__main__":
    app.run(port=int(os.getenv("AI_PROXY_PORT", 5003)))
