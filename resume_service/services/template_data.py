"""
Fixed resume data that tailored input never changes.

Tailored input picks experience and projects by id, controls their order and
supplies roles, bullets, summary and skills; everything else comes from here.
"""

TEMPLATE_DATA = {
    "name": "Alex Morgan",

    # Selected by the isInternship flag of the tailored input
    "contact": {
        "internship": "123 Main St, Halifax | +1 (902) 555-0142 | internship@alexmorgan.dev | https://alexmorgan.dev",
        "job": "123 Main St, Halifax | +1 (902) 555-0142 | alex@alexmorgan.dev | https://alexmorgan.dev",
    },

    "experience": {
        "northwind": {
            "institution": "Northwind Labs",
            "location": "Halifax, NS, Canada",
            "dates": "Summer 2025",
        },
        "harbour-analytics": {
            "institution": "Harbour Analytics",
            "location": "Lisbon, Portugal",
            "dates": "2024 - 2025",
        },
        "tidewater-media": {
            "institution": "Tidewater Media",
            "location": "Vancouver, BC, Canada",
            "dates": "Summer 2024",
        },
    },

    "projects": {
        "booking-crm": {
            "title": "Booking CRM",
            "subtitle": "Customer Management & Booking System",
            "dates": "2025",
            "link": None,  # not published yet
        },
        "campus-sms": {
            "title": "Campus SMS",
            "subtitle": "Bulk SMS Tool for School Staff",
            "dates": "2024 - 2025",
            "link": "https://campus-sms.example.com/en",
        },
        "open-viewings": {
            "title": "OpenViewings",
            "subtitle": "Real Estate Viewing Platform",
            "dates": "2024",
            "link": "openviewings.example.com",
        },
        "workouts-tracker": {
            "title": "Workouts Tracker",
            "subtitle": "Fitness Logging with a Spreadsheet Backend",
            "dates": "2025",
            "link": "https://alexmorgan.dev/project/workouts-tracker",
        },
    },

    "education": {
        "university": "Dalhousie University, Halifax, Canada",
        "degree": "Bachelor of Computer Science",
        "coursework": "Data Structures, Calculus, Web Development, Data Science in Python, Computer Systems",
        "expectedGrad": "Expected Graduation: 2029",
        "cumulativeGPA": "GPA: 4.1/4.3",
    },
}
