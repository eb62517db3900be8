[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "super_services"
version = "0.1.0"
description = "Small HTTP services with a health check, Vault-backed configuration and a docker compose helper CLI"
requires-python = ">=3.10"
keywords = ["microservices", "vault", "configuration", "healthcheck", "flask", "docker-compose"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Framework :: Flask",
    "Intended Audience :: Developers",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: HTTP Servers",
]
dependencies = [
    "requests",
    "flask",
]

[project.optional-dependencies]
test = [
    "pytest",
    "responses",
]

[project.scripts]
super-services-cli = "super_services.cli:main"
super-services-auth = "super_services.auth:main"
super-services-service = "super_services.services:main"

[tool.hatch.build.targets.wheel]
packages = ["super_services"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]
