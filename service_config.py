# service_config.py (shared settings for demo + provider)
import os

# ---------------------------------------------------
# Load settings from an external properties file
# ---------------------------------------------------
def load_properties(filename="demo.properties"):
    cfg = {}
    if not os.path.exists(filename):
        return cfg
    with open(filename) as f:
        for line in f:
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            key, value = line.split("=", 1)
            cfg[key.strip()] = value.strip()
    return cfg

def get_setting(key: str, default=None, cfg=None):
    """Environment wins over the properties file, which wins over the default."""
    if key in os.environ:
        return os.environ[key]
    if cfg and key in cfg:
        return cfg[key]
    return default

def bind_address(cfg=None):
    host = get_setting("HOST", "0.0.0.0", cfg)
    port = int(get_setting("PORT", "8080", cfg))
    return host, port
