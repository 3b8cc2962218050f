"""
Known-correct answers for the four bundled example resumes.

The documents themselves ship as PDFs in the training data directory; the
grades below are what the model is shown as the assistant reply for each.
"""
from typing import Dict, Tuple

from ..schemas.pydantic import Grade, GradeResult

# Filenames inside the training data directory, in the order the examples
# are presented to the model.
TRAINING_FILES: Tuple[Tuple[Grade, str], ...] = (
    (Grade.S, "s_resume.pdf"),
    (Grade.A, "a_resume.pdf"),
    (Grade.B, "b_resume.pdf"),
    (Grade.C, "c_resume.pdf"),
)

TEMPLATE_FLAG = (
    "Format and design: The CV doesn't seem to follow the recommended style for the US "
    "(like Latex or similar generator). Use the [silver.dev template]({template_url})."
)


def expected_results(template_url: str) -> Dict[Grade, GradeResult]:
    template_flag = TEMPLATE_FLAG.format(template_url=template_url)
    return {
        Grade.S: GradeResult(grade=Grade.S, red_flags=[], yellow_flags=[]),
        Grade.A: GradeResult(
            grade=Grade.A,
            red_flags=[
                "Including birth date is unnecessary and can lead to bias.",
                "Including irrelevant details ('fluff') in the Mercado Libre section makes the CV less concise and direct.",
            ],
            yellow_flags=[
                "Including technologies in the CV title or subtitle makes it look like filler content.",
                "Using a Hotmail email address projects an outdated image.",
                "Including full address in the CV; just city and country if relevant is enough.",
                template_flag,
            ],
        ),
        Grade.B: GradeResult(
            grade=Grade.B,
            red_flags=[
                "In the 'About' section, you could mention your achievements and how they align with the company's needs. Words like 'proactive', 'smart' and 'opportunities to grow' don't demonstrate anything - you need to show you're the candidate the company wants.",
                "The experiences listed don't specify concrete achievements, metrics or results obtained in projects. Include metrics that reflect impact, like 'improved loading time by X%' or 'increased backend efficiency by Y%'.",
                "Inconsistent English usage: In the 'EXPERIENCE' section there are minor English errors like 'Particpated' instead of 'Participated'. This can affect professional impression and show lack of attention to detail.",
            ],
            yellow_flags=[
                "The skills section is extensive and not specific enough. Adjust it to the job description you're applying for, including the most relevant skills and omitting less important or redundant ones.",
                "'AWS' is mentioned twice in the skills section, which can be perceived as careless or disorganized.",
                "You mention your university studies are incomplete. While not a deal-breaker, I recommend omitting this.",
                "The 'MercadoCat' project could use more detail. Describe the technologies used, the impact it had, and other relevant details that demonstrate your skills and experience.",
            ],
        ),
        Grade.C: GradeResult(
            grade=Grade.C,
            red_flags=[
                template_flag,
                "Possible use of Word or other outdated processor: If the CV was made in Word or with an unprofessional format, it could be grounds for rejection in some cases.",
                "Use of images: US companies consider including images in the CV inappropriate as it's not standard and can create negative perception.",
                "Representing skills with percentages: Showing skills with percentages is discouraged as it doesn't clearly communicate actual competence level and can lead to misinterpretation. A descriptive format is preferred.",
            ],
            yellow_flags=[],
        ),
    }
