"""
Fixed catalogs for production planning.

Fabric names, processes and skippable stages are process-wide static
configuration. Plans may only reference values listed here.
"""

# =============================================================================
# FABRICS
# =============================================================================
# A fabric name may appear at most once per plan, so the catalog size is
# also the maximum number of fabric line items.

FABRICS = (
    "Cotton",
    "Polyester",
    "Rayon",
    "Linen",
    "Silk",
    "Denim",
    "Lycra",
    "Nylon",
    "Viscose",
    "Wool",
)

# =============================================================================
# PROCESSES
# =============================================================================

PROCESSES = (
    "Dyeing",
    "Printing",
    "Washing",
    "Embroidery",
    "Finishing",
    "Bleaching",
)

# =============================================================================
# STAGES
# =============================================================================
# Production stages a fabric may skip. Skipping is optional.

STAGES = (
    "Cutting",
    "Stitching",
    "Checking",
    "Ironing",
    "Packing",
)

# =============================================================================
# WIZARD
# =============================================================================

# Major fabric value meaning "no single fabric dominates"
NO_MAJOR_FABRIC = "none"

TOTAL_STEPS = 3

STEP_TITLES = {
    1: "Basic Information",
    2: "Fabric Details",
    3: "International Fabrics",
}

STEP_DESCRIPTIONS = {
    1: "Enter the basic production details including dates and quantities.",
    2: "Add and configure the fabrics needed for production.",
    3: "Specify international fabric requirements and select the major fabric.",
}
