"""Starter content loaded by ``manage.py seed_content``."""

SCHOLARSHIPS = [
    {
        "title": "Fulbright Foreign Student Program",
        "description": "Full scholarships for graduate students, young professionals, and artists to study in the United States.",
        "amount": "$40,000",
        "deadline": "2023-06-15",
        "country": "United States",
        "tags": ["Fully Funded", "Merit-Based"],
        "slug": "fulbright-foreign-student-program",
        "link": "https://foreign.fulbrightonline.org/",
    },
    {
        "title": "Erasmus Mundus Joint Master Degrees",
        "description": "Prestigious, integrated, international study program with scholarships for students worldwide.",
        "amount": "€25,000/year",
        "deadline": "2023-02-28",
        "country": "European Union",
        "tags": ["Fully Funded", "Research"],
        "slug": "erasmus-mundus",
        "link": "https://erasmus-plus.ec.europa.eu/",
    },
    {
        "title": "Global Korea Scholarship",
        "description": "Designed to provide international students with opportunities to study at higher educational institutions in Korea.",
        "amount": "₩5,000,000/year",
        "deadline": "2023-03-31",
        "country": "South Korea",
        "tags": ["Partial Aid", "Undergraduate"],
        "slug": "global-korea-scholarship",
        "link": "https://www.studyinkorea.go.kr/en/sub/gks/allnew_invite.do",
    },
]

COUNTRIES = [
    {
        "name": "United States",
        "description": "The United States offers world-class education with diverse programs and research opportunities.",
        "universities": 4500,
        "acceptance_rate": "High Acceptance Rate",
        "slug": "usa",
    },
    {
        "name": "United Kingdom",
        "description": "The UK is known for its prestigious universities and quality education system.",
        "universities": 160,
        "acceptance_rate": "Moderate Acceptance",
        "slug": "uk",
    },
    {
        "name": "Canada",
        "description": "Canada offers quality education, affordable tuition, and a multicultural environment.",
        "universities": 100,
        "acceptance_rate": "High Acceptance Rate",
        "slug": "canada",
    },
    {
        "name": "Australia",
        "description": "Australia provides world-class education with innovative research opportunities.",
        "universities": 43,
        "acceptance_rate": "Moderate Acceptance",
        "slug": "australia",
    },
]

ARTICLES = [
    {
        "title": "10 Tips to Ace Your Student Visa Interview",
        "content": "Detailed content about visa interview preparation...",
        "summary": "Expert advice on how to prepare for and succeed in your student visa interview with practical examples.",
        "slug": "visa-tips",
        "publish_date": "2023-05-12",
        "author": "Sarah Johnson",
        "author_title": "Visa Consultant",
        "category": "Visa Tips",
    },
    {
        "title": "How to Budget for Your Study Abroad Experience",
        "content": "Detailed content about budgeting...",
        "summary": "A comprehensive guide to managing your finances while studying in a foreign country.",
        "slug": "study-abroad-budget",
        "publish_date": "2023-05-05",
        "author": "Michael Chen",
        "author_title": "Financial Advisor",
        "category": "Budgeting",
    },
    {
        "title": "The Ultimate Guide to Finding Student Accommodation Abroad",
        "content": "Detailed content about finding accommodation...",
        "summary": "Discover the best options for student housing and tips for securing your ideal living situation.",
        "slug": "housing-guide",
        "publish_date": "2023-04-28",
        "author": "Emma Rodriguez",
        "author_title": "Housing Specialist",
        "category": "Housing",
    },
]

NEWS = [
    {
        "title": "Major Funding Initiative Announced for International STEM Students",
        "content": "Detailed news content about funding initiative...",
        "summary": "A consortium of universities has announced a new $50 million scholarship fund for international students pursuing STEM degrees.",
        "publish_date": "2023-05-15",
        "category": "Breaking News",
        "is_featured": True,
        "slug": "major-funding-initiative",
    },
    {
        "title": "UK Simplifies Student Visa Application Process",
        "content": "Detailed news content about visa changes...",
        "summary": "New changes aim to streamline the visa application process for international students.",
        "publish_date": "2023-05-10",
        "category": "Visa Updates",
        "is_featured": False,
        "slug": "uk-simplifies-process",
    },
    {
        "title": "Latest Global University Rankings Released",
        "content": "Detailed news content about rankings...",
        "summary": "The new rankings show significant changes in the top international education destinations.",
        "publish_date": "2023-05-07",
        "category": "University Updates",
        "is_featured": False,
        "slug": "global-rankings",
    },
]

UNIVERSITIES = [
    {
        "name": "Harvard University",
        "description": "Harvard University is a private Ivy League research university in Cambridge, Massachusetts.",
        "country": "United States",
        "ranking": 1,
        "slug": "harvard-university",
        "features": ["World-class faculty", "Extensive research opportunities", "Global alumni network"],
    },
    {
        "name": "University of Oxford",
        "description": "The University of Oxford is a collegiate research university in Oxford, England.",
        "country": "United Kingdom",
        "ranking": 2,
        "slug": "university-of-oxford",
        "features": ["Historic institution", "Tutorial-based learning", "Prestigious scholarship programs"],
    },
    {
        "name": "University of Toronto",
        "description": "The University of Toronto is a public research university in Toronto, Ontario, Canada.",
        "country": "Canada",
        "ranking": 18,
        "slug": "university-of-toronto",
        "features": ["Diverse student body", "Strong research funding", "Urban campus"],
    },
]

MENU = [
    {"title": "Home", "url": "/", "position": 1, "children": []},
    {
        "title": "Scholarships",
        "url": "/scholarships",
        "position": 2,
        "children": [
            {"id": 21, "title": "Merit-Based", "url": "/scholarships/merit-based"},
            {"id": 22, "title": "Need-Based", "url": "/scholarships/need-based"},
            {"id": 23, "title": "Govt Funded", "url": "/scholarships/govt-funded"},
            {"id": 26, "title": "Fully Funded", "url": "/scholarships/fully-funded"},
            {"id": 27, "title": "Partial Aid", "url": "/scholarships/partial-aid"},
        ],
    },
    {
        "title": "Articles",
        "url": "/articles",
        "position": 3,
        "children": [
            {"id": 31, "title": "Study Guide", "url": "/articles/study-guide"},
            {"id": 32, "title": "Visa Tips", "url": "/articles/visa-tips"},
            {"id": 36, "title": "Budgeting", "url": "/articles/budgeting"},
            {"id": 37, "title": "Housing", "url": "/articles/housing"},
        ],
    },
    {
        "title": "Countries",
        "url": "/countries",
        "position": 4,
        "children": [
            {"id": 41, "title": "USA", "url": "/countries/usa"},
            {"id": 42, "title": "UK", "url": "/countries/uk"},
            {"id": 43, "title": "Canada", "url": "/countries/canada"},
            {"id": 44, "title": "Australia", "url": "/countries/australia"},
        ],
    },
    {"title": "Universities", "url": "/universities", "position": 5, "children": []},
    {"title": "News", "url": "/news", "position": 6, "children": []},
]

SAMPLE_CONTENT = {
    "scholarships": SCHOLARSHIPS,
    "articles": ARTICLES,
    "countries": COUNTRIES,
    "universities": UNIVERSITIES,
    "news": NEWS,
}
