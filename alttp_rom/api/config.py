import os

BUILD_ROOT = os.environ.get("ALTTP_BUILD_ROOT", os.path.join(os.getcwd(), "builds"))
ROM_PATH = os.environ.get("ALTTP_ROM_PATH")
LOG_LEVEL = os.environ.get("ALTTP_LOG_LEVEL", "INFO")
