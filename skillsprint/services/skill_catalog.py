"""Suggested skills offered to users picking a roadmap topic."""

POPULAR_SKILLS: tuple[str, ...] = (
    "JavaScript Programming",
    "Python Programming",
    "Web Development",
    "Data Science",
    "Machine Learning",
    "Mobile App Development",
    "UI/UX Design",
    "Digital Marketing",
    "Graphic Design",
    "Video Editing",
    "Photography",
    "Public Speaking",
    "Project Management",
    "Content Writing",
    "SEO (Search Engine Optimization)",
    "Social Media Marketing",
    "E-commerce",
    "Cybersecurity",
    "Cloud Computing",
    "DevOps",
)


def list_popular_skills() -> list[str]:
    return list(POPULAR_SKILLS)
