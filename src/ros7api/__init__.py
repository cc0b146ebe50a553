"""ros7api -- Typed Python client for the RouterOS 7 REST API.

The RouterOS REST API transports every property value as a JSON string.
This package provides wire codecs for those strings, a generator that turns
a schema description of the RouterOS menu tree into typed record modules,
and the thin List/Patch operations the generated modules call.

Typical workflow::

    ros7api generate --schema routeros.yaml --output src/myproject/api

Using the bundled generated modules::

    from ros7api.api import interface_bridge_vlan_list
    from ros7api.client import Client

    with Client("10.0.0.1", "admin", password) as client:
        for vlan in interface_bridge_vlan_list(client):
            print(vlan.id, vlan.vlan_ids)

Modules:
    app: Typer application and CLI entry point.
    codec: Wire codecs and the ``Annotated`` field types.
    schema: Schema loading and the menu node tree.
    generator: Code generation from the schema tree.
    client: Transport, record base models, and List/Patch operations.
    api: Generated record modules for the bundled schema.
    models: Pydantic models shared across the package.
    config: XDG-aware configuration and device profiles.
    exceptions: Exception hierarchy with exit-code mapping.
    exit_codes: Numeric exit codes.
    output: stdout/stderr formatting with Rich support.
"""

__version__ = "0.1.0"
