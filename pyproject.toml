[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "tinyarcade"
version = "0.1.0"
description = "Ten small arcade games and toys: Pong, Breakout, Dino Runner, Space Shooter, Tic Tac Toe and more"
requires-python = ">=3.10"
dependencies = [
    "pygame",
]
keywords = ["games", "arcade", "pong", "breakout", "tic-tac-toe", "pygame"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: End Users/Desktop",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Games/Entertainment :: Arcade",
]

[project.optional-dependencies]
test = [
    "pytest",
]

[project.scripts]
tinyarcade-pong = "tinyarcade.pong:main"
tinyarcade-breakout = "tinyarcade.breakout:main"
tinyarcade-flappy-cube = "tinyarcade.flappy_cube:main"
tinyarcade-bouncing-ball = "tinyarcade.bouncing_ball:main"
tinyarcade-dino-runner = "tinyarcade.dino_runner:main"
tinyarcade-space-shooter = "tinyarcade.space_shooter:main"
tinyarcade-camera-movement = "tinyarcade.camera_movement:main"
tinyarcade-falling-blocks = "tinyarcade.falling_blocks:main"
tinyarcade-mouse-circle = "tinyarcade.mouse_circle:main"
tinyarcade-tic-tac-toe = "tinyarcade.tic_tac_toe:main"

[tool.hatch.build.targets.wheel]
packages = ["tinyarcade"]

[tool.pytest.ini_options]
addopts = "-ra"

[tool.ruff]
line-length = 100
target-version = "py310"

[tool.mypy]
python_version = "3.10"
ignore_missing_imports = true
