from resume_analyzer.analysis.analyzer import ResumeAnalyzer
from resume_analyzer.analysis.models import AnalysisReport, ExperienceLevel

__all__ = ["AnalysisReport", "ExperienceLevel", "ResumeAnalyzer"]
