# Canonical question catalog for the ITC Factory Insight survey.
# Keep IDs stable: the CSV export columns are keyed by engagement ids.
from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Tuple


@dataclass(frozen=True)
class EngagementQuestion:
    id: str
    hindi: str
    english: str
    dimension: str


@dataclass(frozen=True)
class BehavioralOption:
    text: str
    trait: str


@dataclass(frozen=True)
class BehavioralQuestion:
    id: str
    question: str
    option_a: BehavioralOption
    option_b: BehavioralOption

    @property
    def options(self) -> Tuple[BehavioralOption, BehavioralOption]:
        return (self.option_a, self.option_b)


@dataclass(frozen=True)
class SJTOption:
    key: str
    text: str
    alignment: str


@dataclass(frozen=True)
class SJTQuestion:
    id: str
    scenario: str
    options: Tuple[SJTOption, ...]

    def option_keys(self) -> List[str]:
        return [o.key for o in self.options]


# Rendered top to bottom: most positive first.
LIKERT_VALUES: List[int] = [5, 4, 3, 2, 1]

LIKERT_ANCHORS: Dict[int, str] = {
    5: "Strongly Agree (पूरी तरह सहमत)",
    4: "Agree (सहमत)",
    3: "Neutral (तटस्थ)",
    2: "Disagree (असहमत)",
    1: "Strongly Disagree (पूरी तरह असहमत)",
}

# ---- Engagement (Likert) ----
ENGAGEMENT_QUESTIONS: List[EngagementQuestion] = [
    EngagementQuestion("e1", "क्या आपको लगता है कि आपके काम का कोई उद्देश्य है?",
                       "Do you feel your work has a purpose?", "Organizational Engagement"),
    EngagementQuestion("e2", "क्या आप अपनी भूमिका और जिम्मेदारियों को स्पष्ट रूप से समझते हैं?",
                       "Do you clearly understand your role and responsibilities?", "Job Engagement"),
    EngagementQuestion("e3", "क्या आपका काम आपको ऊर्जावान बनाता है?",
                       "Does your work energize you?", "Vigor"),
    EngagementQuestion("e4", "क्या आप काम चुनौतीपूर्ण होने पर भी डटे रहते हैं?",
                       "Do you persist even when work is challenging?", "Dedication"),
    EngagementQuestion("e5", "क्या आपके पास अपना काम करने के लिए आवश्यक सभी उपकरण और संसाधन हैं?",
                       "Do you have all the tools and resources needed to do your job?", "Organizational Support"),
    EngagementQuestion("e6", "क्या आपको हाल ही में अच्छे काम के लिए सराहना मिली है?",
                       "Have you received recognition for good work recently?", "Recognition"),
    EngagementQuestion("e7", "क्या आपके टीम के सदस्य एक-दूसरे की मदद करते हैं?",
                       "Do your team members help one another?", "Teamwork"),
    EngagementQuestion("e8", "क्या आप प्रबंधन के निर्णयों को समझते हैं?",
                       "Do you understand management’s decisions?", "Communication"),
    EngagementQuestion("e9", "क्या आप नियमित रूप से नए विचार और सुझाव साझा करते हैं?",
                       "Do you share new ideas and suggestions regularly?", "Innovation"),
    EngagementQuestion("e10", "क्या आप कभी अपने काम में इतने व्यस्त हो जाते हैं कि आपको समय का पता ही नहीं चलता?",
                       "Do you ever get so involved in your work that you lose track of time?", "Absorption"),
    EngagementQuestion("e11", "क्या आपको लगता है कि आपका काम आपके जीवन में संतुलन लाता है?",
                       "Do you feel your work brings balance to your life?", "Well-being"),
    EngagementQuestion("e12", "क्या आपको समय पर सुरक्षा अपडेट और निर्देश मिलते हैं?",
                       "Do you receive timely safety updates and instructions?", "Welfare/Environment"),
]

# ---- Behavioral (forced choice) ----
BEHAVIORAL_QUESTIONS: List[BehavioralQuestion] = [
    BehavioralQuestion(
        "b1",
        "When under pressure at work, which is more likely true for you?",
        BehavioralOption("I tend to complete tasks faster, even if they are not perfect.", "Executor"),
        BehavioralOption("I slow down to ensure every detail is correct.", "Guardian"),
    ),
    BehavioralQuestion(
        "b2",
        "If your coworker isn’t performing well, what would you most likely do?",
        BehavioralOption("Take on extra work myself without making a fuss.", "Harmonizer"),
        BehavioralOption("Tell the supervisor so they can intervene.", "Informer"),
    ),
    BehavioralQuestion(
        "b3",
        "Which of these best matches your natural work style?",
        BehavioralOption("I prefer to strictly follow routines and rules.", "Guardian"),
        BehavioralOption("I like to adapt and try new ways to do my tasks.", "Innovation"),
    ),
    BehavioralQuestion(
        "b4",
        "If you make a mistake during your shift, how do you usually react?",
        BehavioralOption("I quietly fix it and move on.", "Executor"),
        BehavioralOption("I discuss it with the team to ensure it doesn’t happen again.", "Informer"),
    ),
    BehavioralQuestion(
        "b5",
        "What motivates you more at work?",
        BehavioralOption("Receiving praise from supervisors.", "Harmonizer"),
        BehavioralOption("Knowing that my work helps the team succeed.", "Harmonizer"),
    ),
]

# ---- Situational judgment ----
SJT_QUESTIONS: List[SJTQuestion] = [
    SJTQuestion(
        "s1",
        "You notice your colleague using outdated tools, which might affect quality. What would you do?",
        (
            SJTOption("A", "Inform the supervisor immediately to avoid defects.", "High Initiative"),
            SJTOption("B", "Quietly give your own tools for the day and report later.", "Balanced Adaptability"),
            SJTOption("C", "Wait and see if the quality actually suffers before acting.", "Risk-Averse"),
            SJTOption("D", "Raise the issue in the next team meeting as a process improvement point.", "Strategic"),
        ),
    ),
    SJTQuestion(
        "s2",
        "Your manager forgets to inform your team about a sudden schedule change. Half your team misses the shift.",
        (
            SJTOption("A", "Tell the team individually about future alerts.", "Teamwork"),
            SJTOption("B", "Raise it in the next feedback session with the manager.", "Communicative"),
            SJTOption("C", "Escalate to HR and demand accountability.", "Risk-Averse"),
            SJTOption("D", "Remind the manager to create a WhatsApp group for timely updates.", "Strategic"),
        ),
    ),
]


@dataclass(frozen=True)
class Catalog:
    """The three ordered question sets, traversed in insertion order."""
    engagement: Tuple[EngagementQuestion, ...]
    behavioral: Tuple[BehavioralQuestion, ...]
    situational: Tuple[SJTQuestion, ...]

    @property
    def engagement_ids(self) -> List[str]:
        return [q.id for q in self.engagement]


DEFAULT_CATALOG = Catalog(
    engagement=tuple(ENGAGEMENT_QUESTIONS),
    behavioral=tuple(BEHAVIORAL_QUESTIONS),
    situational=tuple(SJT_QUESTIONS),
)
