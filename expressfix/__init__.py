"""ExpressFix.

Backend service for the ExpressFix design-review application. Users upload
image or PDF design files and receive feedback from four review tools:

- **Smart Fix**: contrast, alignment, spacing and typography scores with issues.
- **Brand Checker**: compliance against a stored brand guideline.
- **Typography Guide**: detected fonts and type hierarchy.
- **AI Suggestions**: categorised improvement ideas with impact/effort.

The analysis payloads are generated mock data. The service owns persistence of
uploads, analysis results, brand guidelines, exports and notifications, and
delegates identity to an external auth service and file bytes to object storage.

Subpackages
-----------

- ``expressfix.core``: logging, monitoring, errors, database layer and I/O models.
- ``expressfix.server``: the FastAPI application, routes and services.
"""

__version__ = "1.0.0"
