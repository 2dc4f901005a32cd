"""Static catalogue data for the universities directory and content pages."""

UNIVERSITIES = [
    {
        "id": 1,
        "name": "Stanford University",
        "location": "California, USA",
        "acceptance_rate": 4.3,
        "annual_fees": 55000,
        "description": "A world-renowned private research university.",
    },
    {
        "id": 2,
        "name": "Harvard University",
        "location": "Massachusetts, USA",
        "acceptance_rate": 5.2,
        "annual_fees": 57000,
        "description": "The oldest institution of higher learning in the United States.",
    },
    {
        "id": 3,
        "name": "Massachusetts Institute of Technology (MIT)",
        "location": "Massachusetts, USA",
        "acceptance_rate": 7.3,
        "annual_fees": 59000,
        "description": "A globally renowned technological university.",
    },
    {
        "id": 4,
        "name": "University of Oxford",
        "location": "Oxford, UK",
        "acceptance_rate": 17.5,
        "annual_fees": 27000,
        "description": "The oldest university in the English-speaking world.",
    },
    {
        "id": 5,
        "name": "University of Cambridge",
        "location": "Cambridge, UK",
        "acceptance_rate": 21.0,
        "annual_fees": 28000,
        "description": "A prestigious university known for its academic excellence.",
    },
    {
        "id": 6,
        "name": "California Institute of Technology (Caltech)",
        "location": "California, USA",
        "acceptance_rate": 6.4,
        "annual_fees": 56000,
        "description": "A world-class science and engineering institution.",
    },
    {
        "id": 7,
        "name": "University of California, Berkeley",
        "location": "California, USA",
        "acceptance_rate": 16.1,
        "annual_fees": 45000,
        "description": "A public research university with a strong academic reputation.",
    },
    {
        "id": 8,
        "name": "University of Chicago",
        "location": "Illinois, USA",
        "acceptance_rate": 7.9,
        "annual_fees": 61000,
        "description": "A leading research university known for its rigorous academics.",
    },
    {
        "id": 9,
        "name": "Princeton University",
        "location": "New Jersey, USA",
        "acceptance_rate": 5.8,
        "annual_fees": 58000,
        "description": "An Ivy League institution with a strong focus on undergraduate education.",
    },
    {
        "id": 10,
        "name": "Yale University",
        "location": "Connecticut, USA",
        "acceptance_rate": 6.7,
        "annual_fees": 60000,
        "description": "An Ivy League university with a rich history and tradition.",
    },
]

NEWS_ITEMS = [
    {
        "id": 1,
        "title": "New Student Visa Regulations Announced",
        "description": "Updated visa regulations for international students, including extended post-study work opportunities.",
        "date": "March 15, 2024",
    },
    {
        "id": 2,
        "title": "Healthcare Coverage Expansion",
        "description": "International students now have access to expanded healthcare coverage, including mental health services.",
        "date": "March 10, 2024",
    },
    {
        "id": 3,
        "title": "Scholarship Program Launch",
        "description": "A new scholarship program for international students offers full tuition coverage.",
        "date": "March 5, 2024",
    },
    {
        "id": 4,
        "title": "Housing Support Initiative",
        "description": "New housing support services for international students, including guaranteed first-year accommodation.",
        "date": "March 1, 2024",
    },
    {
        "id": 5,
        "title": "Career Counseling Services Expanded",
        "description": "Career counseling now includes specialized guidance for international students.",
        "date": "March 25, 2024",
    },
    {
        "id": 6,
        "title": "Travel Grant for Research Students",
        "description": "Research students can apply for travel grants to attend conferences and workshops abroad.",
        "date": "April 5, 2024",
    },
]

EVENTS = [
    {
        "id": 1,
        "title": "Global Cultural Exchange Fair",
        "description": "Traditional performances, food, and networking opportunities.",
        "date": "April 15, 2024",
        "link": "#",
    },
    {
        "id": 2,
        "title": "Career Development Workshop",
        "description": "Job opportunities and career development strategies for international students.",
        "date": "April 20, 2024",
        "link": "#",
    },
    {
        "id": 3,
        "title": "Language Exchange Meetup",
        "description": "Practice different languages with native speakers in a casual environment.",
        "date": "April 25, 2024",
        "link": "#",
    },
    {
        "id": 4,
        "title": "Student Success Webinar",
        "description": "Expert advice on academic success, time management, and cultural adaptation.",
        "date": "May 1, 2024",
        "link": "#",
    },
    {
        "id": 5,
        "title": "Immigration Law Seminar",
        "description": "Immigration lawyers address common visa concerns for international students.",
        "date": "September 18, 2024",
        "link": "#",
    },
]

ACTIVITIES = [
    {
        "id": 1,
        "title": "City Explorer Tour",
        "description": "Discover the city's landmarks and hidden gems with fellow international students.",
        "date": "April 10, 2024",
        "image": "https://images.unsplash.com/photo-1449824913935-59a10b8d2000?w=800",
    },
    {
        "id": 2,
        "title": "International Food Festival",
        "description": "Share and taste traditional dishes from around the world.",
        "date": "April 22, 2024",
        "image": "https://images.unsplash.com/photo-1555939594-58d7cb561ad1?w=800",
    },
    {
        "id": 3,
        "title": "Language Learning Group",
        "description": "Weekly language exchange sessions for practicing conversation skills.",
        "date": "Every Wednesday",
        "image": "https://images.unsplash.com/photo-1522202176988-66273c2fd55f?w=800",
    },
    {
        "id": 4,
        "title": "Sports Tournament",
        "description": "Join our international sports tournament and make new friends.",
        "date": "May 5, 2024",
        "image": "https://images.unsplash.com/photo-1461896836934-ffe607ba8211?w=800",
    },
]

VISA_GUIDES = [
    {
        "id": 1,
        "country": "United States",
        "requirements": [
            "Valid passport with at least 6 months validity",
            "Completed DS-160 form",
            "SEVIS payment receipt",
            "I-20 form from university",
            "Financial documents showing sufficient funds",
        ],
        "processing_time": "2-3 weeks",
    },
    {
        "id": 2,
        "country": "United Kingdom",
        "requirements": [
            "Valid passport",
            "CAS number from university",
            "Proof of funding for course and living costs",
            "TB test results (if applicable)",
            "English language proficiency proof",
        ],
        "processing_time": "3-4 weeks",
    },
    {
        "id": 3,
        "country": "Canada",
        "requirements": [
            "Valid passport",
            "Letter of acceptance from university",
            "Proof of financial support",
            "Statement of purpose",
            "Biometrics",
        ],
        "processing_time": "4-8 weeks",
    },
]

PACKING_GUIDES = [
    {
        "id": 1,
        "title": "Essential Documents",
        "items": [
            "Passport and visa documents",
            "University acceptance letter",
            "Insurance documents",
            "Medical records and prescriptions",
        ],
    },
    {
        "id": 2,
        "title": "Academic Materials",
        "items": ["Laptop and charger", "Portable hard drive", "Academic transcripts", "Language certificates"],
    },
    {
        "id": 3,
        "title": "Personal Items",
        "items": ["Weather-appropriate clothing", "Basic first-aid kit", "Power adapters", "Small items from home"],
    },
    {
        "id": 4,
        "title": "Financial Preparation",
        "items": [
            "International credit/debit cards",
            "Some local currency",
            "Student banking documents",
            "Budget planning worksheet",
        ],
    },
]

COUNTRY_GUIDES = [
    {
        "id": 1,
        "name": "United States",
        "banking": "Students typically need their passport, I-20, and proof of address to open an account.",
        "healthcare": "Most universities require health insurance; campus health centers provide basic care.",
    },
    {
        "id": 2,
        "name": "United Kingdom",
        "banking": "You'll need your passport, BRP card, and proof of address to open an account.",
        "healthcare": "Register with a local GP once you arrive; the NHS covers most services.",
    },
    {
        "id": 3,
        "name": "Canada",
        "banking": "Bring your study permit, passport, and acceptance letter; many banks offer no-fee student accounts.",
        "healthcare": "Most provinces provide coverage for international students; apply for your card soon after arrival.",
    },
    {
        "id": 4,
        "name": "Australia",
        "banking": "You'll need your passport, student visa, and enrollment proof to open an account.",
        "healthcare": "Overseas Student Health Cover (OSHC) is mandatory and covers basic medical care.",
    },
]

LANDING_FEATURES = [
    {"title": "Safe Housing", "description": "Find verified housing options near your university with trusted hosts."},
    {"title": "Student Community", "description": "Connect with fellow students and build lasting friendships."},
    {"title": "Job Opportunities", "description": "Access student-friendly job listings and internship opportunities."},
]

TESTIMONIALS = [
    {
        "id": 1,
        "name": "Priya Sharma",
        "role": "Graduate Student",
        "university": "University of Oxford",
        "content": "GlobalNest helped me find a flat near campus before I even landed.",
    },
    {
        "id": 2,
        "name": "Lucas Moreau",
        "role": "Exchange Student",
        "university": "Stanford University",
        "content": "I booked a mentor session and sorted my visa paperwork in one afternoon.",
    },
    {
        "id": 3,
        "name": "Aiko Tanaka",
        "role": "Undergraduate",
        "university": "University of Cambridge",
        "content": "The community map made it easy to meet other students from home.",
    },
]


def get_university(university_id: int) -> dict | None:
    return next((uni for uni in UNIVERSITIES if uni["id"] == university_id), None)
