"""
Discovery constants. No file loading here (see jbrecent.config).
Record file names, Toolbox marker, bundle pattern, env names, product codes.
"""
# ---------------------------------------------------------------------------
# Projects root (input A)
# ---------------------------------------------------------------------------
RECORD_FILE_NAMES = ("recentProjects.xml", "recentSolutions.xml")

# Directory directly under the projects root that proves Toolbox is installed
TOOLBOX_MARKER = "Toolbox"

# Owning applications whose records are never read
IGNORED_APPLICATIONS = frozenset({"CodeWithMeGuest", "DataGrip"})

USER_HOME_PLACEHOLDER = "$USER_HOME$"

# Component option that holds the path -> RecentProjectMetaInfo map
RECENT_INFO_OPTION = "additionalInfo"

# ---------------------------------------------------------------------------
# Toolbox installation root (input B)
# ---------------------------------------------------------------------------
BUNDLE_PATTERN = r".*\.app"

# ---------------------------------------------------------------------------
# Known production codes (IDE families)
# ---------------------------------------------------------------------------
PRODUCT_CODES = (
    "AI", "OC", "CL", "DB", "GO", "IC", "IU", "PS",
    "PC", "PY", "RD", "RM", "WS", "IE", "MPS", "PE",
)

# ---------------------------------------------------------------------------
# Env var names
# ---------------------------------------------------------------------------
ENV_CONFIG = "JBRECENT_CONFIG"
ENV_LOG_LEVEL = "JBRECENT_LOG_LEVEL"
ENV_LOG_DIR = "JBRECENT_LOG_DIR"
ENV_PROJECTS_ROOT = "JBRECENT_PROJECTS_ROOT"
ENV_TOOLBOX_ROOT = "JBRECENT_TOOLBOX_ROOT"
