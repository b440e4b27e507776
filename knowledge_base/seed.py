from __future__ import annotations

from typing import Dict, List


def build_default_knowledge() -> Dict[str, List[str]]:
    """
    Curated snippets per question category. Injected into the evaluation
    prompt as background for the model.
    """
    return {
        "technical": [
            "React Hooks let functional components use state and other React features",
            "useState manages local state, useEffect handles side effects",
            "Custom hooks allow reusing stateful logic between components",
            "RESTful APIs follow REST architecture principles with standard HTTP methods",
            "GET retrieves data, POST creates, PUT updates, DELETE removes",
            "HTTP status codes signal the outcome: 200 OK, 201 Created, 404 Not Found, 500 Server Error",
        ],
        "behavioral": [
            "The STAR method (Situation, Task, Action, Result) structures behavioral answers",
            "Including metrics and quantifiable results strengthens an answer",
            "Showing learning and personal growth is valued by interviewers",
            "Mistakes should be presented honestly, focusing on the fix and the lesson learned",
            "Answers should be specific and relevant to personal experience",
        ],
        "teamwork": [
            "Effective communication is key to successful teamwork",
            "Active listening and win-win solutions resolve conflict",
            "Proactively contributing to a positive environment improves team productivity",
            "Cross-functional collaboration requires adaptability and flexibility",
            "Celebrating team achievements strengthens cohesion",
        ],
        "leadership": [
            "Leading without formal authority requires influence and credibility",
            "Building consensus and a shared vision is fundamental to leading teams",
            "Effective leaders adapt their style to the situation and the team",
            "Effective delegation empowers the team and develops its capabilities",
            "Leaders should model the values they promote",
        ],
        "problem-solving": [
            "A structured process improves the quality of solutions",
            "Clearly defining the problem is the critical first step",
            "Generating several alternatives before deciding widens the options",
            "Weighing pros and cons supports informed decisions",
            "Documenting the process makes future learning easier",
        ],
        "communication": [
            "Adapting the message to the audience improves understanding",
            "Analogies simplify complex technical concepts",
            "Visual aids complement verbal communication",
            "Checking for understanding ensures effective communication",
            "Two-way feedback improves the quality of communication",
        ],
        "adaptability": [
            "An agile mindset embraces change as an opportunity",
            "Constant communication with stakeholders reduces uncertainty",
            "Prioritizing by business value maximizes impact",
            "Flexible architecture makes adapting to change easier",
            "Iterative development allows continuous adjustment",
        ],
        "culture-fit": [
            "Authentic motivation builds trust",
            "Connecting personal work with organizational impact is valuable",
            "Balancing technical and human aspects shows maturity",
            "Genuine passion for the work is contagious",
            "Personal values should align with the organization's values",
        ],
    }


def build_interview_tips() -> Dict[str, List[str]]:
    return {
        "general": [
            "Prepare specific stories you can adapt to different questions",
            "Practice the STAR method for behavioral questions",
            "Research the company and connect your answers to its values",
            "Prepare thoughtful questions to ask the interviewer",
            "Practice explaining technical concepts simply",
        ],
        "technical": [
            "Explain your thought process step by step",
            "Include trade-offs and design considerations",
            "Mention edge cases and error handling",
            "Use concrete examples from your experience",
            "Draw diagrams when appropriate",
        ],
        "behavioral": [
            "Be specific with dates, numbers and results",
            "Focus on your personal contribution, not the team's",
            "Include what you learned from each experience",
            "Prepare examples of both successes and failures",
            "Practice telling stories concisely",
        ],
    }
