[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "socialnet"
version = "0.1.0"
description = "A small social network model: users, posts, comments, notifications and friendships."
requires-python = ">=3.10"
dependencies = []
keywords = ["social network", "users", "posts", "comments", "notifications", "friendship"]
classifiers = [
    "Development Status :: 3 - Alpha",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Communications",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
socialnet = "socialnet.cli:main"

[tool.hatch.build.targets.wheel]
packages = ["socialnet"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
