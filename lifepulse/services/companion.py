"""
Rule-based wellness companion.

Replies and suggestions come from fixed keyword tables; no model is called.
"""

import re
from typing import Dict, List, Optional, Tuple

from .. import models

WAITING_REPLY = "I'm waiting for your message. How can I help you today?"

FALLBACK_REPLY = (
    "I understand you're asking about your health. For specific medical advice, it's always best to "
    "consult with a healthcare professional. I can offer general wellness tips like staying hydrated, "
    "getting regular exercise, ensuring adequate sleep, eating a balanced diet, and managing stress "
    "through relaxation techniques. Would you like me to elaborate on any of these general wellness areas?"
)

# (topic, pattern, reply). The first matching topic wins.
REPLY_TABLE: List[Tuple[str, "re.Pattern[str]", str]] = [
    (
        "greeting",
        re.compile(r"\b(hello|hi|hey)\b"),
        "Hello! I'm your health assistant. How can I help you today?",
    ),
    (
        "fever",
        re.compile(r"\b(fever|temperature|hot)"),
        "For fever, I recommend: 1) Rest and stay hydrated, 2) Take acetaminophen or ibuprofen as directed "
        "if needed, 3) Use a lukewarm compress if comfortable, and 4) Seek medical attention if your fever "
        "is very high (above 103°F/39.4°C) or lasts more than three days.",
    ),
    (
        "headache",
        re.compile(r"\b(headache|migraine)"),
        "For headaches, try these approaches: 1) Drink water as dehydration is a common cause, 2) Rest in a "
        "quiet, dark room if you have a migraine, 3) Apply a warm or cold compress to your head or neck, "
        "4) Try over-the-counter pain relievers as directed. If headaches are severe or persistent, please "
        "consult your doctor.",
    ),
    (
        "cold",
        re.compile(r"\b(cold|flu|cough|congestion)"),
        "For cold and flu symptoms: 1) Get plenty of rest, 2) Stay hydrated with water and warm liquids like "
        "tea, 3) Use over-the-counter medications as directed to relieve symptoms, 4) Consider using a "
        "humidifier, and 5) Wash your hands frequently to prevent spreading germs. See a doctor if symptoms "
        "are severe or last more than 10 days.",
    ),
    (
        "stomach",
        re.compile(r"\b(stomach|nausea|vomit|diarrhea)"),
        "For stomach issues: 1) Stay hydrated with small sips of water or clear fluids, 2) Try bland foods "
        "like rice, toast, or bananas once you can eat, 3) Avoid dairy, caffeine, alcohol, and fatty or spicy "
        "foods, 4) Rest and consider over-the-counter remedies appropriate for your specific symptoms. If "
        "symptoms are severe or persistent, please consult a healthcare provider.",
    ),
    (
        "sleep",
        re.compile(r"\b(sleep|insomnia|can't sleep)"),
        "To improve sleep: 1) Maintain a consistent sleep schedule, 2) Create a relaxing bedtime routine, "
        "3) Make your bedroom dark, quiet, and comfortable, 4) Limit screen time before bed, 5) Avoid caffeine "
        "and large meals close to bedtime, and 6) Consider relaxation techniques like deep breathing or "
        "meditation.",
    ),
    (
        "stress",
        re.compile(r"\b(stress|anxiety|worried)"),
        "For managing stress and anxiety: 1) Practice deep breathing exercises, 2) Try meditation or "
        "mindfulness, 3) Get regular physical activity, 4) Ensure you're getting enough sleep, 5) Connect "
        "with supportive friends or family, and 6) Consider professional help if anxiety is significantly "
        "affecting your daily life.",
    ),
    (
        "pain",
        re.compile(r"\b(back pain|muscle pain|joint pain)"),
        "For pain management: 1) Apply ice for acute injuries (first 48 hours) and heat for chronic pain, "
        "2) Practice gentle stretching and movement as tolerated, 3) Maintain good posture, 4) Consider "
        "over-the-counter pain relievers as directed, and 5) See a healthcare provider if pain is severe, "
        "worsening, or accompanied by other concerning symptoms.",
    ),
    (
        "diet",
        re.compile(r"\b(diet|nutrition|eat|food)"),
        "For a balanced diet: 1) Focus on plenty of fruits, vegetables, and whole grains, 2) Include lean "
        "proteins like fish, poultry, beans, and nuts, 3) Choose healthy fats from sources like olive oil and "
        "avocados, 4) Limit processed foods, added sugars, and excessive salt, and 5) Stay hydrated by "
        "drinking plenty of water throughout the day.",
    ),
    (
        "exercise",
        re.compile(r"\b(exercise|workout|fitness)"),
        "For exercise recommendations: 1) Aim for at least 150 minutes of moderate aerobic activity weekly, "
        "2) Include strength training exercises at least twice a week, 3) Start slowly if you're new to "
        "exercise and gradually increase intensity, 4) Choose activities you enjoy to help maintain "
        "consistency, and 5) Always warm up before and cool down after exercise.",
    ),
]


_REPLIES = {topic: reply for topic, _, reply in REPLY_TABLE}


def match_topic(message: str) -> Optional[str]:
    """Returns the first topic whose keywords appear in the message."""
    text = message.lower()
    for topic, pattern, _ in REPLY_TABLE:
        if pattern.search(text):
            return topic
    return None


def get_chat_reply(message: str) -> str:
    """Picks the canned reply for a user message."""
    if not message or not message.strip():
        return WAITING_REPLY
    topic = match_topic(message)
    return _REPLIES[topic] if topic else FALLBACK_REPLY


# --- Health suggestions ---
DEFAULT_SUGGESTIONS = [
    "Stay hydrated by drinking at least 8 glasses of water daily",
    "Aim for 7-9 hours of quality sleep each night",
    "Include 30 minutes of moderate exercise in your daily routine",
]

HIGH_PRIORITY_TERMS = ["urgent", "serious", "critical", "immediate", "important", "significant"]
LOW_PRIORITY_TERMS = ["mild", "slight", "minor", "normal", "good", "adequate"]


def _parse_blood_pressure(reading: Optional[str]) -> Optional[Tuple[int, int]]:
    if not reading:
        return None
    match = re.match(r"^\s*(\d+)\s*/\s*(\d+)\s*$", reading)
    if not match:
        return None
    return int(match.group(1)), int(match.group(2))


def _vital_observations(stats: models.HealthStats) -> List[str]:
    observations = []

    bp = _parse_blood_pressure(stats.blood_pressure)
    if bp:
        systolic, diastolic = bp
        if systolic >= 140 or diastolic >= 90:
            observations.append(
                f"Your blood pressure of {stats.blood_pressure} is high; it is important to review it with your doctor"
            )
        elif systolic >= 130 or diastolic >= 80:
            observations.append(
                f"Your blood pressure of {stats.blood_pressure} is slightly elevated; cut back on salt and keep active"
            )

    if stats.heart_rate is not None:
        if stats.heart_rate > 100 or stats.heart_rate < 50:
            observations.append(
                f"Your resting heart rate of {stats.heart_rate} bpm is outside the usual range; "
                "it is important to mention it to your doctor if it persists"
            )

    if stats.hydration_glasses < stats.hydration_goal:
        observations.append(
            f"You have had {stats.hydration_glasses} of {stats.hydration_goal} glasses of water today; "
            "keep a bottle nearby and sip regularly"
        )

    if stats.steps < stats.steps_goal:
        remaining = stats.steps_goal - stats.steps
        observations.append(
            f"You are {remaining:,} steps short of your daily goal; a brisk 15-minute walk adds about 1,500 steps"
        )

    if not observations:
        observations.append("Your vitals are in the normal range today; keep up your current routine")
    return observations


def prioritise(suggestions: List[str]) -> str:
    text = " ".join(suggestions).lower()
    if any(term in text for term in HIGH_PRIORITY_TERMS):
        return "high"
    if any(term in text for term in LOW_PRIORITY_TERMS):
        return "low"
    return "medium"


def get_health_suggestions(stats: Optional[models.HealthStats]) -> Dict[str, object]:
    """
    Builds three suggestions from the user's vitals snapshot.

    Observations about the snapshot come first; the default wellness tips fill
    any remaining slots. Priority follows the wording of the suggestions.
    """
    observations = _vital_observations(stats) if stats is not None else []
    suggestions = (observations + DEFAULT_SUGGESTIONS)[:3]
    return {"suggestions": suggestions, "priority": prioritise(suggestions)}
