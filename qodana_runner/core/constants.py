"""Constants used throughout the Qodana Runner application."""


# Task graph
GROUP_NAME = "qodana"
EXTENSION_NAME = "qodana"
UPDATE_INSPECTIONS_TASK_NAME = "updateInspections"
RUN_INSPECTIONS_TASK_NAME = "runInspections"
STOP_INSPECTIONS_TASK_NAME = "stopInspections"
CLEAN_INSPECTIONS_TASK_NAME = "cleanInspections"

# Docker-related constants
EXECUTABLE = "docker"
DOCKER_IMAGE_NAME_INSPECTIONS = "jetbrains/qodana"
DOCKER_CONTAINER_NAME_INSPECTIONS = "idea-inspections"

# Extension defaults
DEFAULT_RESULTS_SUBPATH = "build/results"
DEFAULT_SHOW_REPORT_PORT = 8080

# Paths and ports inside the inspections container
CONTAINER_REPORT_PORT = 8080
CONTAINER_PROJECT_DIR = "/data/project"
CONTAINER_RESULTS_DIR = "/data/results"
CONTAINER_CACHE_DIR = "/data/cache"
CONTAINER_PROFILE_PATH = "/data/profile.xml"
CONTAINER_DISABLED_PLUGINS_PATH = "/root/.config/idea/disabled_plugins.txt"

# Tokens understood by the inspections image entrypoint
SAVE_REPORT_FLAG = "--save-report"
SHOW_REPORT_FLAG = "--show-report"
CHANGES_ARGUMENT = "-changes"
IDE_PROPERTIES_VARIABLE = "IDE_PROPERTIES_PROPERTY"

# Configuration file
CONFIG_FILE_NAME = "qodana-runner.yaml"

# Exit codes reported when the executable cannot be launched
COMMAND_NOT_FOUND_EXIT_CODE = 127
COMMAND_NOT_EXECUTABLE_EXIT_CODE = 126
