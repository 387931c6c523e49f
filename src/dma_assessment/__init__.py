"""Digital Maturity Assessment scoring and benchmark service.

Scores DMA questionnaires across six dimensions, classifies the overall
result into a maturity band and compares it with sector cohorts.
"""

__version__ = "0.1.0"
