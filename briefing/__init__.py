"""
Orchestration core for the AI research morning briefing.

Import the orchestrator directly from here:

```python
from briefing import BriefingOrchestrator

orchestrator = BriefingOrchestrator.from_generator(generator)
briefing = await orchestrator.run(["vision", "robotics"])
```
"""

from .models import ResearchResult  # noqa: F401
from .orchestrator import BriefingOrchestrator, rank_results, run_briefing  # noqa: F401
from .settings import BriefingSettings  # noqa: F401
from .text_generator import AutoGenTextGenerator, TextGenerator  # noqa: F401

__all__ = [
    "AutoGenTextGenerator",
    "BriefingOrchestrator",
    "BriefingSettings",
    "ResearchResult",
    "TextGenerator",
    "rank_results",
    "run_briefing",
]
