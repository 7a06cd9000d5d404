# provider_server.py (localhostprovider, REST + Swagger)
from flask import Flask, request
from flasgger import Swagger

from service_config import load_properties, get_setting, bind_address

PROVIDER_CONFIG = load_properties(get_setting("PROVIDER_CONFIG", "provider.properties"))

DELIVERED_PREFIX = "This was actually delivered by localhostprovider running locally: "

TEXT = {"Content-Type": "text/plain; charset=utf-8"}

def my_feign_receiver():
    """
    Echo a value back with a delivery note
    ---
    tags: [Provider]
    produces:
      - text/plain
    parameters:
      - in: query
        name: myValue
        type: string
        required: true
        default: hello
    responses:
      200:
        description: Delivery note followed by myValue
        schema: {type: string}
      400:
        description: myValue missing
    """
    # /myfeignreceiver?myValue=abc
    my_value = request.args["myValue"]
    return DELIVERED_PREFIX + my_value, 200, TEXT

# method, path, endpoint, view
ROUTES = [
    ("GET", "/myfeignreceiver", "my_feign_receiver", my_feign_receiver),
]

def create_app():
    app = Flask(__name__)
    for method, path, endpoint, view in ROUTES:
        app.add_url_rule(path, endpoint, view, methods=[method])
    Swagger(app, template={
        "swagger": "2.0",
        "info": {"title": "localhostprovider", "version": "1.0.0"},
        "basePath": "/",
        "schemes": ["http"],
    })
    return app

if __name__ == "__main__":
    app = create_app()
    host, port = bind_address(PROVIDER_CONFIG)
    print(f"localhostprovider REST server on http://{host}:{port}  (docs at /apidocs)")
    app.run(host=host, port=port, debug=False)
