[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "sysprac"
version = "0.1.0"
description = "Small Unix-style utilities and concurrency building blocks: run-length compression, a tiny shell, checksums, file tools, locks and network file servers."
requires-python = ">=3.10"
dependencies = []
keywords = [
    "utilities",
    "shell",
    "run-length encoding",
    "checksum",
    "crc16",
    "fletcher",
    "b-tree",
    "locks",
    "semaphores",
    "concurrency",
    "sockets",
]
classifiers = [
    "Development Status :: 4 - Beta",
    "Environment :: Console",
    "Intended Audience :: Developers",
    "Intended Audience :: Education",
    "Operating System :: POSIX",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Utilities",
    "Topic :: System :: Shells",
    "Topic :: System :: Archiving :: Compression",
]

[project.optional-dependencies]
test = ["pytest"]

[project.scripts]
wzip = "sysprac.rle:wzip_main"
wunzip = "sysprac.rle:wunzip_main"
wish = "sysprac.wish:main"
check-xor = "sysprac.checksum:xor_main"
check-fletcher = "sysprac.checksum:fletcher_main"
crc16 = "sysprac.checksum:crc_main"
create-csum = "sysprac.checksum:create_csum_main"
check-csum = "sysprac.checksum:check_csum_main"
myfind = "sysprac.find:main"
myls = "sysprac.ls:main"
mytail = "sysprac.tail:main"
mystat = "sysprac.statinfo:main"
vector-demo = "sysprac.vector:main"
btree-bench = "sysprac.btree:main"
simple-counter-bench = "sysprac.counters:simple_main"
approximate-counter-bench = "sysprac.counters:approximate_main"
list-bench = "sysprac.lists:main"
twolockqueue-demo = "sysprac.twolockqueue:main"
file-server = "sysprac.fileserver:server_main"
file-client = "sysprac.fileserver:client_main"
udp-client = "sysprac.udp:client_main"
udp-server = "sysprac.udp:server_main"

[tool.hatch.build.targets.wheel]
packages = ["sysprac"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.ruff.lint]
select = ["E", "F", "W", "I", "B", "UP"]

[tool.mypy]
python_version = "3.10"
warn_unused_ignores = true
warn_redundant_casts = true
