[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "codekata"
version = "0.1.0"
description = "Classic coding exercises: binary trees, arrays, strings, linked lists, sorting and small concurrency and networking patterns."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "algorithms",
    "data-structures",
    "binary-tree",
    "interview",
    "exercises",
    "thread-pool",
    "singleton",
    "chat",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Education",
    "Intended Audience :: Developers",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Education",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
codekata-logger = "codekata.logger:main"
codekata-textfile = "codekata.textfile:main"
codekata-chat-server = "codekata.chat:server_main"
codekata-chat-client = "codekata.chat:client_main"

[tool.hatch.build.targets.wheel]
packages = ["codekata"]

[tool.pytest.ini_options]
addopts = "-ra"
testpaths = ["tests"]

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
