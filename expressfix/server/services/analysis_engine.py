"""
Design analysis engine.

Produces the review payloads of the four design tools. No image is inspected:
scores are drawn at random from fixed per-tool ranges and the issue and
suggestion texts are fixed. Every score is ``base + randrange(span)``, so the
lower bound is inclusive and ``base + span`` is never reached.

The random source is injectable so tests can seed it.
"""

from __future__ import annotations

import random
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from expressfix.core.database.entities.brand_guidelines import BrandGuideline
from expressfix.core.models.domain import AnalysisType

SMART_FIX_ISSUES: List[Dict[str, str]] = [
    {"type": "contrast", "severity": "medium", "message": "Some text elements have low contrast"},
    {"type": "spacing", "severity": "low", "message": "Inconsistent padding detected"},
    {"type": "alignment", "severity": "high", "message": "Elements not aligned to grid"},
]

SMART_FIX_SUGGESTIONS: List[str] = [
    "Increase text contrast by 15% for better readability",
    "Apply consistent 16px spacing between elements",
    "Align all elements to a 12-column grid system",
]

BRAND_CHECK_VIOLATIONS: List[Dict[str, str]] = [
    {"category": "colors", "severity": "medium", "message": "Non-brand color detected in CTA button"},
    {"category": "typography", "severity": "low", "message": "Font weight inconsistent with brand guidelines"},
]

BRAND_CHECK_SUGGESTIONS: List[str] = [
    "Replace #FF5733 with brand primary color #8B5CF6",
    "Use brand font weight 600 for all headings",
    "Maintain minimum 24px clear space around logo",
]

BRAND_CHECKS: List[Dict[str, Any]] = [
    {"category": "Color Palette", "score": 85, "status": "good", "message": "Brand colors used correctly"},
    {"category": "Typography", "score": 65, "status": "warning", "message": "Font hierarchy needs adjustment"},
    {"category": "Logo Usage", "score": 90, "status": "good", "message": "Logo placement and sizing correct"},
    {"category": "Spacing", "score": 70, "status": "warning", "message": "Some inconsistent spacing detected"},
    {"category": "Contrast", "score": 95, "status": "good", "message": "Excellent contrast ratios"},
    {"category": "Layout", "score": 60, "status": "error", "message": "Grid system not followed"},
]

TYPOGRAPHY_DETECTED_FONTS: List[str] = ["Inter", "Arial", "Helvetica"]

TYPOGRAPHY_FONT_SIZES: Dict[str, str] = {"h1": "32px", "h2": "24px", "h3": "20px", "body": "16px"}

TYPOGRAPHY_FONT_HIERARCHY: List[Dict[str, str]] = [
    {
        "level": "H1",
        "text": "Welcome to Our Platform",
        "size": "38px",
        "weight": "Bold",
        "font": "Helvetica",
        "usage": "Page headers, main titles",
    },
    {
        "level": "H2",
        "text": "Key Features",
        "size": "26px",
        "weight": "Semibold",
        "font": "Helvetica",
        "usage": "Section headers",
    },
    {
        "level": "H3",
        "text": "Getting Started",
        "size": "20px",
        "weight": "Medium",
        "font": "Arial",
        "usage": "Sub-sections",
    },
    {
        "level": "Body",
        "text": "This is the main content area where you can read about our services and offerings.",
        "size": "15px",
        "weight": "Regular",
        "font": "Arial",
        "usage": "Main content, paragraphs",
    },
    {
        "level": "Caption",
        "text": "Last updated: January 2024",
        "size": "13px",
        "weight": "Regular",
        "font": "Arial",
        "usage": "Supporting text, labels",
    },
]

TYPOGRAPHY_SUGGESTIONS: List[str] = [
    "Use consistent font family throughout design",
    "Increase line height to 1.6 for better readability",
    "Establish clearer font size hierarchy",
]

AI_SUGGESTION_CATEGORIES: Dict[str, List[Dict[str, str]]] = {
    "layout": [
        {
            "title": "Grid Alignment",
            "description": "Align elements to a consistent 12-column grid system",
            "impact": "high",
            "effort": "medium",
        },
        {
            "title": "Visual Balance",
            "description": "Redistribute elements for better visual weight distribution",
            "impact": "medium",
            "effort": "low",
        },
        {
            "title": "Content Hierarchy",
            "description": "Restructure layout to improve information flow",
            "impact": "high",
            "effort": "high",
        },
    ],
    "colors": [
        {
            "title": "Color Harmony",
            "description": "Adjust color palette for better visual harmony",
            "impact": "high",
            "effort": "low",
        },
        {
            "title": "Contrast Enhancement",
            "description": "Improve text contrast for better accessibility",
            "impact": "high",
            "effort": "medium",
        },
    ],
    "spacing": [
        {
            "title": "Consistent Margins",
            "description": "Apply consistent spacing throughout the design",
            "impact": "medium",
            "effort": "low",
        },
        {
            "title": "White Space Optimization",
            "description": "Better use of white space for improved readability",
            "impact": "medium",
            "effort": "medium",
        },
    ],
    "content": [
        {
            "title": "Content Prioritization",
            "description": "Reorganize content based on importance",
            "impact": "high",
            "effort": "high",
        },
        {
            "title": "Call-to-Action Placement",
            "description": "Optimize CTA positioning for better conversion",
            "impact": "high",
            "effort": "medium",
        },
    ],
}

AI_SUGGESTIONS: List[str] = [
    "Implement 12-column grid system for better alignment",
    "Adjust color palette for improved visual harmony",
    "Optimize white space distribution",
    "Enhance call-to-action visibility",
]


class AnalysisOutcome(BaseModel):
    """What one review tool reports for a design."""

    overall_score: int = Field(ge=0, le=100)
    results: Dict[str, Any]
    suggestions: List[str]


class DesignAnalyzer:
    """Generates mocked review results for each analysis type."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def _score(self, base: int, span: int) -> int:
        return base + self._rng.randrange(span)

    def analyze(self, analysis_type: AnalysisType, guideline: Optional[BrandGuideline] = None) -> AnalysisOutcome:
        """Run one review tool.

        Args:
            analysis_type: One of the requestable analysis types
            guideline: Brand guideline embedded in a brand check result

        Returns:
            The generated outcome

        Raises:
            ValueError: For ``enhancement``, which is not a review tool
        """
        if analysis_type == AnalysisType.smart_fix:
            return self.smart_fix()
        if analysis_type == AnalysisType.brand_check:
            return self.brand_check(guideline)
        if analysis_type == AnalysisType.typography:
            return self.typography()
        if analysis_type == AnalysisType.ai_suggestions:
            return self.ai_suggestions()
        raise ValueError(f"Analysis type {analysis_type.value!r} cannot be requested")

    def smart_fix(self) -> AnalysisOutcome:
        overall = self._score(70, 30)
        results = {
            "contrast": self._score(80, 20),
            "alignment": self._score(70, 30),
            "spacing": self._score(75, 25),
            "typography": self._score(80, 20),
            "issues": [dict(issue) for issue in SMART_FIX_ISSUES],
        }
        return AnalysisOutcome(overall_score=overall, results=results, suggestions=list(SMART_FIX_SUGGESTIONS))

    def brand_check(self, guideline: Optional[BrandGuideline] = None) -> AnalysisOutcome:
        overall = self._score(75, 25)
        results: Dict[str, Any] = {
            "colorCompliance": self._score(80, 20),
            "fontCompliance": self._score(70, 30),
            "logoCompliance": self._score(85, 15),
            "spacingCompliance": self._score(75, 25),
            "violations": [dict(violation) for violation in BRAND_CHECK_VIOLATIONS],
            "checks": [dict(check) for check in BRAND_CHECKS],
        }
        if guideline is not None:
            results["guidelineId"] = guideline.id
            results["guidelineName"] = guideline.name
            results["brandData"] = guideline.brand_data()
        return AnalysisOutcome(overall_score=overall, results=results, suggestions=list(BRAND_CHECK_SUGGESTIONS))

    def typography(self) -> AnalysisOutcome:
        overall = self._score(80, 20)
        results = {
            "hierarchy": self._score(80, 20),
            "readability": self._score(85, 15),
            "consistency": self._score(75, 25),
            "lineHeight": self._score(90, 10),
            "detectedFonts": list(TYPOGRAPHY_DETECTED_FONTS),
            "fontSizes": dict(TYPOGRAPHY_FONT_SIZES),
            "fontHierarchy": [dict(row) for row in TYPOGRAPHY_FONT_HIERARCHY],
        }
        return AnalysisOutcome(overall_score=overall, results=results, suggestions=list(TYPOGRAPHY_SUGGESTIONS))

    def ai_suggestions(self) -> AnalysisOutcome:
        overall = self._score(70, 30)
        results = {
            "layoutScore": self._score(75, 25),
            "colorScore": self._score(80, 20),
            "contentScore": self._score(70, 30),
            "categories": {name: [dict(item) for item in items] for name, items in AI_SUGGESTION_CATEGORIES.items()},
        }
        return AnalysisOutcome(overall_score=overall, results=results, suggestions=list(AI_SUGGESTIONS))
