# super_services

A small toolkit for a set of HTTP services:

- `super_services.server` – a Flask application with a `/healthz` endpoint,
- `super_services.vault` – a client for the key/value (version 2) secrets
  engine of a Vault server,
- `super_services.config` – configuration looked up in Vault first and in the
  environment second,
- `super_services.logger` – a logger that writes one JSON object per line,
- `super_services.auth` – the authentication service entry point,
- `super_services.services` – the entry point of the other services,
- `super_services.cli` – a command-line helper that drives `docker compose`.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## The auth service

`super-services-auth` loads its settings and then serves HTTP on all
interfaces, on the port given by `PORT` (default `8080`):

```
export JWT_SECRET=secret
export OAUTH_CLIENT_ID=example-client
export OAUTH_CLIENT_SECRET=secret
super-services-auth
```

It needs `JWT_SECRET`, `OAUTH_CLIENT_ID` and `OAUTH_CLIENT_SECRET`. If one of
them cannot be found, or the Vault client cannot be set up, it logs the error
and exits with status 1. Its log lines are JSON objects written to standard
error.

### Reading settings from Vault

Set `VAULT_ENABLED=true` together with `VAULT_ADDR` and `VAULT_TOKEN`:

```
export VAULT_ENABLED=true
export VAULT_ADDR=http://127.0.0.1:8200
export VAULT_TOKEN=token
super-services-auth
```

Each key is looked up, lower-cased, in the secret `<service>/config` of the
`secret` mount (for the auth service: `auth/config`). If Vault cannot be read,
or the secret has no such key, the upper-cased key is read from the
environment instead. A key that is in neither place, or is empty in the
environment, raises `ConfigError`.

## The other services

The admin, audit, billing, gateway, notification, search and user services
only print a start-up line and exit:

```
super-services-service admin
```

prints `Admin service running...`.

## Health checks

`create_app(name)` builds a Flask application that answers

```
GET /healthz
```

with status 200 and the body `{"status": "ok"}`.

## The compose helper

`super-services-cli` runs `docker compose` (or `docker-compose`) with its
output going straight to your terminal:

```
super-services-cli container up            # docker compose up -d
super-services-cli container down          # docker compose down
super-services-cli container up --vault    # start only the Vault containers
super-services-cli container down --vault  # stop only the Vault containers
super-services-cli container --up          # docker-compose up -d
super-services-cli container --down        # docker-compose down
```

With `--vault` the files `./deployments/vault/docker-compose.yml` and
`./deployments/vault/docker-compose.dev.yml` are passed to `docker compose`.
`--up` and `--down` cannot be given together. If the started program fails,
an error line is printed on standard error.

## Using the library

```python
from super_services.vault import VaultClient
from super_services.config import Config
from super_services.server import create_app

client = VaultClient.from_env()
client.write_secret("auth/config", {"jwt_secret": "secret"})
print(client.read_secret("auth/config"))
print(client.list_secrets("auth"))
client.delete_secret("auth/config")

config = Config.from_env("auth")
print(config.get("JWT_SECRET"))

app = create_app("auth")
```

Failures talking to Vault raise `VaultError`; configuration that cannot be set
up or a key that cannot be found raises `ConfigError`.

## What it does not do

- Only the auth service serves HTTP. The admin, audit, billing, gateway,
  notification, search and user services print their start-up line and exit;
  they do not start a server.
- The `vault` command of `super-services-cli` does not read or write secrets;
  use `VaultClient` for that.
- The CLI does not set up, initialise or unseal a Vault server; it only starts
  and stops containers described by compose files you provide.