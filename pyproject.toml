[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "procparse"
version = "0.1.0"
description = "Process pipelines, piped child programs, sandboxed calls and two small recursive-descent parsers"
requires-python = ">=3.10"
dependencies = []
keywords = ["pipeline", "subprocess", "popen", "sandbox", "parser", "json", "calculator"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Software Development :: Libraries",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
argo = "procparse.argo:main"
vbc = "procparse.vbc:main"

[tool.hatch.build.targets.wheel]
packages = ["procparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
