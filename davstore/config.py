import inspect
import json
import logging
import os
from typing import Optional

from davstore.davclient import DAVStorageClient

"""
Configuration for the storage client.  A client can be configured
through keyword arguments, environment variables prefixed with
``DAVSTORE_`` or a json/yaml configuration file with sections of
``davstore_``-prefixed keys.
"""

log = logging.getLogger("davstore")

## Keys of the configuration file and the environment mapped to
## DAVStorageClient parameters, for the ones that differ
KEY_ALIASES = {
    "user": "username",
    "pass": "password",
    "public": "public_url",
}

CONFIG_FILES = (
    "{cfgdir}/davstore/storage.conf",
    "{cfgdir}/davstore/storage.yaml",
    "{cfgdir}/davstore/storage.json",
    "/etc/davstore/storage.conf",
)


def expand_config_section(config, section="default"):
    """
    The keys of a section, including those inherited through the
    ``inherits`` keyword.  Keys in the section itself win.
    """
    if section in config and "inherits" in config[section]:
        ret = expand_config_section(config, config[section]["inherits"])
    else:
        ret = {}
    if section in config:
        ret.update(config[section])
    return ret


def read_config(fn, interactive_error=False):
    """
    Reads a configuration file, json or yaml.  If no file name is
    given, the usual locations are tried.

    Returns None if no file name is given and no file is found, and
    an empty dict if the given file is missing or broken.
    """
    if not fn:
        cfgdir = f"{os.environ.get('HOME', '/')}/.config"
        for config_file in CONFIG_FILES:
            cfg = read_config(config_file.format(cfgdir=cfgdir))
            if cfg:
                return cfg
        return None

    try:
        try:
            with open(fn, "rb") as config_file:
                return json.load(config_file)
        except json.decoder.JSONDecodeError:
            ## Late import, wrapped in try/except.  yaml is an optional
            ## dependency.
            try:
                import yaml

                try:
                    with open(fn, "rb") as config_file:
                        return yaml.load(config_file, yaml.SafeLoader)
                except yaml.YAMLError:
                    log.error(
                        f"config file {fn} exists but is neither valid json nor yaml.  Check the syntax."
                    )
            except ImportError:
                log.error(
                    f"config file {fn} exists but is not valid json, and pyyaml is not installed."
                )

    except FileNotFoundError:
        log.info("no config file found at %s", fn)
    except ValueError:
        if interactive_error:
            log.error(
                "error in config file.  Be aware that the interactive configuration will ignore and overwrite the current broken config file",
                exc_info=True,
            )
        else:
            log.error("error in config file.  It will be ignored", exc_info=True)
    return {}


def _client_parameters() -> set:
    """Keyword arguments of DAVStorageClient that can be configured"""
    parameters = set(inspect.signature(DAVStorageClient.__init__).parameters)
    return parameters - {"self", "logger", "session", "auth"}


def _conn_params(items, prefix: str) -> dict:
    conn_params = {}
    known = _client_parameters()
    for k, v in items:
        if not k.lower().startswith(prefix) or not v:
            continue
        key = k[len(prefix) :].lower()
        if key.startswith("config"):
            continue
        key = KEY_ALIASES.get(key, key)
        if key not in known:
            log.warning("Ignoring unknown configuration key %s", k)
            continue
        if key == "timeout":
            v = int(v)
        conn_params[key] = v
    return conn_params


def _make_client(conn_params: dict, source: str) -> Optional[DAVStorageClient]:
    if "url" not in conn_params:
        log.error("No url given in %s, ignoring it", source)
        return None
    return DAVStorageClient(**conn_params)


def get_davclient(
    check_config_file: bool = True,
    config_file: Optional[str] = None,
    config_section: Optional[str] = None,
    environment: bool = True,
    **config_data,
) -> Optional[DAVStorageClient]:
    """
    This function will yield a DAVStorageClient object.  It will not
    try to connect.  It will read configuration from various sources,
    dependent on the parameters given, in this order:

    * Data from the parameters given
    * Environment variables prepended with `DAVSTORE_`, like `DAVSTORE_URL`, `DAVSTORE_PUBLIC_URL`, `DAVSTORE_USERNAME`, `DAVSTORE_PASSWORD`.
    * Environment variables `DAVSTORE_CONFIG_FILE` and `DAVSTORE_CONFIG_SECTION` will be honored if environment is set
    * Configuration file, keys prefixed with `davstore_`

    Unknown keys in the environment or the configuration file are
    logged and skipped.  Returns None if no usable configuration was
    found.
    """
    if config_data:
        return DAVStorageClient(**config_data)

    if environment:
        conf = _conn_params(os.environ.items(), "davstore_")
        if conf:
            client = _make_client(conf, "the DAVSTORE_ environment variables")
            if client is not None:
                return client
        if not config_file:
            config_file = os.environ.get("DAVSTORE_CONFIG_FILE")
        if not config_section:
            config_section = os.environ.get("DAVSTORE_CONFIG_SECTION")

    if check_config_file:
        cfg = read_config(config_file)
        if cfg:
            section = expand_config_section(cfg, config_section or "default")
            conn_params = _conn_params(section.items(), "davstore_")
            if conn_params:
                return _make_client(conn_params, "the configuration file")

    return None
