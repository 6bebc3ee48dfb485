"""Domain objects for WebAnalyzer - explicit re-exports to satisfy linters."""
from .analysis_result import AnalysisResult as AnalysisResult
from .analysis_result import LinkAnalysis as LinkAnalysis
from .http_response import HttpResponse as HttpResponse
from .link import LinkResolution as LinkResolution
from .link import ResolvedLink as ResolvedLink
from .page_tokens import PageTokens as PageTokens

__all__ = ["AnalysisResult", "LinkAnalysis", "HttpResponse", "LinkResolution", "ResolvedLink", "PageTokens"]
