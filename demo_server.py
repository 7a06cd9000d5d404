# demo_server.py (demo service, REST + Swagger)
from flask import Flask, request, current_app
from flasgger import Swagger

from service_config import load_properties, get_setting, bind_address
from provider_client import ProviderClient

# ---------------------------------------------------
# Load settings from external properties file (env wins)
# ---------------------------------------------------
DEMO_CONFIG = load_properties(get_setting("DEMO_CONFIG", "demo.properties"))

DEFAULT_PROVIDER_BASE_URL = "http://localhostprovider:8080"

TEXT = {"Content-Type": "text/plain; charset=utf-8"}

def utf16_length(s: str) -> int:
    """Length in UTF-16 code units; characters outside the BMP count twice."""
    return len(s.encode("utf-16-le")) // 2

# ---------------------------------------------------
# CRUD-style endpoints
# ---------------------------------------------------
def get_demo():
    """
    Echo myParam
    ---
    tags: [Demo]
    produces:
      - text/plain
    parameters:
      - in: query
        name: myParam
        type: string
        required: true
        default: hello
    responses:
      200:
        description: Greeting with myParam
        schema: {type: string}
      400:
        description: myParam missing
    """
    my_param = request.args["myParam"]
    return "Get Response from demo with param: " + my_param, 200, TEXT

def post_demo():
    """
    Count the characters of the request body
    ---
    tags: [Demo]
    consumes:
      - text/plain
    produces:
      - text/plain
    parameters:
      - in: body
        name: body
        required: true
        schema: {type: string, example: "some text"}
    responses:
      200:
        description: Body length in characters
        schema: {type: string}
    """
    body = request.get_data(as_text=True)
    return f"Post Body was {utf16_length(body)} characters long", 200, TEXT

def put_demo():
    """
    Pretend to update something
    ---
    tags: [Demo]
    produces:
      - text/plain
    responses:
      200:
        description: Always succeeds
        schema: {type: string}
    """
    return "Put was succesful", 200, TEXT

def delete_demo():
    """
    Pretend to delete something
    ---
    tags: [Demo]
    produces:
      - text/plain
    responses:
      200:
        description: Always succeeds
        schema: {type: string}
    """
    return "Delete was succesful", 200, TEXT

# ---------------------------------------------------
# Forwarding endpoint (calls localhostprovider)
# ---------------------------------------------------
def get_feign_response():
    """
    Forward myParam to localhostprovider and relay its answer
    ---
    tags: [Demo]
    produces:
      - text/plain
    parameters:
      - in: query
        name: myParam
        type: string
        required: true
        default: hello
    responses:
      200:
        description: The provider's response body, unchanged
        schema: {type: string}
      400:
        description: myParam missing
      500:
        description: Provider unreachable or answered with an error
    """
    my_param = request.args["myParam"]
    client = current_app.extensions["provider_client"]
    # ProviderCallError is left to Flask (-> 500)
    feign_result = client.get_my_value(my_param)
    content_type = feign_result.content_type or TEXT["Content-Type"]
    return feign_result.body, 200, {"Content-Type": content_type}

# method, path, endpoint, view
ROUTES = [
    ("GET", "/demo", "get_demo", get_demo),
    ("GET", "/demo/feign", "get_feign_response", get_feign_response),
    ("POST", "/demo", "post_demo", post_demo),
    ("PUT", "/demo", "put_demo", put_demo),
    ("DELETE", "/demo", "delete_demo", delete_demo),
]

# ---------------------------------------------------
# Flask + Swagger
# ---------------------------------------------------
def create_app(provider_client=None, config=None):
    cfg = DEMO_CONFIG if config is None else config
    if provider_client is None:
        base_url = get_setting("PROVIDER_BASE_URL", DEFAULT_PROVIDER_BASE_URL, cfg)
        provider_client = ProviderClient(base_url)

    app = Flask(__name__)
    app.extensions["provider_client"] = provider_client
    for method, path, endpoint, view in ROUTES:
        app.add_url_rule(path, endpoint, view, methods=[method])

    Swagger(app, template={
        "swagger": "2.0",
        "info": {"title": "demo", "version": "1.0.0"},
        "basePath": "/",
        "schemes": ["http"],
    })
    return app

# ---------------------------------------------------
# Run
# ---------------------------------------------------
if __name__ == "__main__":
    app = create_app()
    host, port = bind_address(DEMO_CONFIG)
    print(f"demo REST server on http://{host}:{port}  (docs at /apidocs)")
    print("Forwarding /demo/feign to:", app.extensions["provider_client"].base_url)
    app.run(host=host, port=port, debug=False)
