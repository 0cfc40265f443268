[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "webargus"
version = "0.1.0"
description = "Watch web pages until they come online and send an SMS notification when they do"
requires-python = ">=3.10"
dependencies = [
    "python-dotenv",
]
keywords = ["monitoring", "uptime", "link-checking", "sms", "notifications", "http"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Environment :: Console",
    "Environment :: Web Environment",
    "Intended Audience :: System Administrators",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Internet :: WWW/HTTP :: Site Management :: Link Checking",
    "Topic :: System :: Monitoring",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
webargus = "webargus.app:main"

[tool.hatch.build.targets.wheel]
packages = ["webargus"]

[tool.pytest.ini_options]
addopts = "-ra"
