"""
Demo data - a handful of employers, listings and courses for local runs.

Enabled with SEED_DEMO_DATA=true. Every record is looked up before it is
inserted (employers by email, listings by employer and title, courses by
title), so restarting against a persistent database only fills in what is
missing.
"""

import logging
import secrets
from datetime import date
from typing import Optional, Tuple

from internhub.core.auth import hash_password
from internhub.models import CourseType, UserRole
from internhub.repositories import Repository

DEMO_EMPLOYERS = [
    {"company_name": "Google", "industry": "Technology", "company_size": "10000+", "domain": "google.com"},
    {"company_name": "Microsoft", "industry": "Technology", "company_size": "10000+", "domain": "microsoft.com"},
    {"company_name": "Amazon", "industry": "E-commerce", "company_size": "10000+", "domain": "amazon.com"},
    {"company_name": "Adobe", "industry": "Software", "company_size": "10000+", "domain": "adobe.com"},
]

# employer index -> internship
DEMO_INTERNSHIPS = [
    (0, {
        "title": "Software Development Intern",
        "description": "Work on production web applications alongside experienced developers.",
        "location": "Bangalore",
        "stipend_amount": 20000,
        "duration_months": 6,
        "start_date": date(2024, 6, 1),
        "skills_required": ["JavaScript", "React", "Node.js", "HTML", "CSS"],
        "responsibilities": ["Develop and maintain web applications", "Participate in code reviews"],
        "perks": ["Certificate", "Letter of Recommendation", "Flexible Work Hours"],
        "job_offer_possibility": True,
    }),
    (1, {
        "title": "Data Science Intern",
        "description": "Analyze large datasets and build machine learning models.",
        "location": "Mumbai",
        "is_remote": True,
        "is_part_time": True,
        "stipend_amount": 15000,
        "duration_months": 3,
        "skills_required": ["Python", "Machine Learning", "SQL", "Statistics"],
        "responsibilities": ["Build and evaluate models", "Create data visualizations"],
        "perks": ["Mentorship", "Pre-Placement Offer"],
        "job_offer_possibility": True,
    }),
    (2, {
        "title": "Marketing Intern",
        "description": "Help run campaigns and learn digital marketing strategies.",
        "location": "Delhi",
        "is_part_time": True,
        "stipend_amount": 10000,
        "duration_months": 4,
        "skills_required": ["Content Writing", "Social Media", "Digital Marketing"],
        "responsibilities": ["Create social media content", "Conduct market research"],
        "perks": ["Certificate"],
    }),
]

DEMO_JOBS = [
    (3, {
        "title": "UI/UX Designer",
        "description": "Design user interfaces and experiences for our creative tools.",
        "location": "Bangalore",
        "salary_min": 600000,
        "salary_max": 1000000,
        "experience_required_years": 0,
        "is_fresher_job": True,
        "skills_required": ["UI Design", "Figma", "Prototyping"],
        "responsibilities": ["Develop wireframes and prototypes", "Conduct usability testing"],
    }),
    (2, {
        "title": "Data Analyst",
        "description": "Analyze data to drive business decisions and strategy.",
        "location": "Work from Home",
        "is_remote": True,
        "salary_min": 500000,
        "salary_max": 800000,
        "experience_required_years": 1,
        "skills_required": ["SQL", "Python", "Tableau", "Excel"],
        "responsibilities": ["Analyze data and create reports"],
    }),
]

DEMO_COURSES = [
    {
        "title": "Web Development",
        "description": "Learn HTML, CSS, JavaScript, React and Node.js to become a full-stack web developer.",
        "course_type": CourseType.certification,
        "duration_weeks": 8,
        "price": 9999,
        "discount_percentage": 80,
        "rating": 4,
        "learner_count": 121587,
        "category": "programming",
    },
    {
        "title": "Programming with Python",
        "description": "Master Python from the basics to advanced topics including data science.",
        "course_type": CourseType.certification,
        "duration_weeks": 6,
        "price": 7999,
        "discount_percentage": 80,
        "rating": 4,
        "learner_count": 87848,
        "category": "programming",
    },
    {
        "title": "Digital Marketing",
        "description": "Learn social media marketing, SEO, content strategy and online advertising.",
        "course_type": CourseType.certification,
        "duration_weeks": 8,
        "price": 8999,
        "discount_percentage": 80,
        "rating": 4,
        "learner_count": 64000,
        "category": "marketing",
    },
    {
        "title": "Full Stack Development",
        "description": "Comprehensive program with guaranteed job placement and industry mentorship.",
        "course_type": CourseType.placement_guarantee,
        "duration_weeks": 16,
        "price": 49999,
        "rating": 5,
        "learner_count": 25000,
        "placement_guarantee": True,
        "placement_salary_min": 300000,
        "placement_salary_max": 1000000,
        "placement_type": "job",
        "category": "programming",
    },
    {
        "title": "Data Science",
        "description": "Master data analysis with guaranteed internship placement at top companies.",
        "course_type": CourseType.placement_guarantee,
        "duration_weeks": 24,
        "price": 39999,
        "rating": 5,
        "learner_count": 18000,
        "placement_guarantee": True,
        "placement_type": "internship",
        "placement_stipend": 40000,
        "category": "data_science",
    },
]


def _demo_employer(repo: Repository, employer: dict) -> Tuple[int, bool]:
    """Return the demo employer's profile id, creating the account if needed."""
    domain = employer["domain"]
    user = repo.users.first(email=f"hiring@{domain}")
    created = user is None
    if created:
        # Demo employers get a random password nobody knows
        user = repo.users.create({
            "email": f"hiring@{domain}",
            "password_hash": hash_password(secrets.token_urlsafe(16)),
            "first_name": employer["company_name"],
            "last_name": "Hiring",
            "user_type": UserRole.employer,
            "languages": [],
        })

    profile = repo.employer_profiles.first(user_id=user.id)
    if profile is None:
        created = True
        profile = repo.employer_profiles.create({
            "user_id": user.id,
            "company_name": employer["company_name"],
            "company_logo": f"https://logo.clearbit.com/{domain}",
            "company_website": f"https://{domain}",
            "industry": employer["industry"],
            "company_size": employer["company_size"],
        })
    return profile.id, created


def seed_demo_data(repo: Repository, logger: Optional[logging.Logger] = None) -> bool:
    """Insert whatever part of the demo catalog is missing. Returns False when nothing was."""
    logger = logger or logging.getLogger(__name__)
    counts = {"employers": 0, "internships": 0, "jobs": 0, "courses": 0}

    employer_ids = []
    for employer in DEMO_EMPLOYERS:
        employer_id, created = _demo_employer(repo, employer)
        employer_ids.append(employer_id)
        counts["employers"] += created

    for collection, listings in (("internships", DEMO_INTERNSHIPS), ("jobs", DEMO_JOBS)):
        for index, listing in listings:
            target = getattr(repo, collection)
            if target.first(employer_id=employer_ids[index], title=listing["title"]) is None:
                target.create({**listing, "employer_id": employer_ids[index]})
                counts[collection] += 1

    for course in DEMO_COURSES:
        if repo.courses.first(title=course["title"]) is None:
            repo.courses.create(course)
            counts["courses"] += 1

    if not any(counts.values()):
        logger.info("Demo data already present, skipping seed")
        return False
    logger.info(
        "Seeded %d employers, %d internships, %d jobs, %d courses",
        counts["employers"], counts["internships"], counts["jobs"], counts["courses"],
    )
    return True
