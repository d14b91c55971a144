"""
Demo rows for local development, loaded through the services so they obey
the same validation as real traffic. Rows are inserted oldest first.
"""
import logging
from datetime import datetime, timedelta

from marketplace.services.auth_service import auth_service
from marketplace.services.job_request_service import JobRequestService
from marketplace.services.provider_service import ProviderService
from marketplace.services.quote_service import QuoteService
from marketplace.storage import Store
from marketplace.utils.timefmt import utcnow

logger = logging.getLogger(__name__)

DEMO_PASSWORD = "password123"
CUSTOMER_EMAIL = "user@example.com"
PROVIDER_EMAIL = "provider@example.com"

# (days ago, owner email, fields)
DEMO_JOB_REQUESTS = [
    (14, PROVIDER_EMAIL, {
        "title": "Electrical Workers for Factory Setup",
        "location": "Bangalore, Karnataka",
        "duration": "2 months",
        "workers": 8,
        "budget": "₹22,000 per worker",
        "description": "We need electrical workers for setting up electrical systems in our new "
                       "factory. Experience with industrial electrical systems is required.",
        "job_type": "contract",
        "contact_info": "electrical@factory.com",
    }),
    (7, CUSTOMER_EMAIL, {
        "title": "Skilled Fitters for Construction Project",
        "location": "Delhi, NCR",
        "duration": "6 months",
        "workers": 10,
        "budget": "₹20,000 per worker",
        "description": "Hiring skilled fitters for our ongoing construction project. Candidates "
                       "should have experience in fitting pipes, structures, and equipment.",
        "job_type": "full-time",
        "contact_info": "hr@construct.com",
    }),
    (5, PROVIDER_EMAIL, {
        "title": "Packers Needed for Warehouse",
        "location": "Chennai, Tamil Nadu",
        "duration": "1 month",
        "workers": 15,
        "budget": "₹15,000 per worker",
        "description": "Looking for workers who can pack and prepare goods for shipping in our "
                       "warehouse. Previous warehouse experience is preferred.",
        "job_type": "part-time",
        "contact_info": "warehouse@shipping.com",
    }),
    (3, CUSTOMER_EMAIL, {
        "title": "Need Welders for Factory Maintenance",
        "location": "Mumbai, Maharashtra",
        "duration": "3 months",
        "workers": 5,
        "budget": "₹25,000 per worker",
        "description": "Looking for experienced welders who can handle maintenance work in our "
                       "manufacturing plant.",
        "job_type": "contract",
        "contact_info": "contact@factory.com",
    }),
]

DEMO_PROVIDER = {
    "company_name": "Smith Industries",
    "contact_person": "Jane Smith",
    "phone": "9876543211",
    "email": PROVIDER_EMAIL,
    "address": "Industrial Area, Sector 5, Mumbai",
    "specialization": ["welder", "fitter", "electrician"],
    "years_in_business": 8,
    "description": "Industrial labor provider with expertise in welding, fitting and electrical work.",
}


def _clock_at(now: datetime, days_ago: int):
    return lambda: now - timedelta(days=days_ago)


def seed_demo_data(store: Store, now: datetime | None = None) -> dict:
    now = now or utcnow()
    if store.select_one("users", {"email": CUSTOMER_EMAIL}):
        logger.info("Demo data already present, skipping seed")
        return {}

    user_ids = {
        email: auth_service.sign_up(store, email, DEMO_PASSWORD)["id"]
        for email in (CUSTOMER_EMAIL, PROVIDER_EMAIL)
    }
    ProviderService(store, clock=_clock_at(now, 180)).create(
        {**DEMO_PROVIDER, "user_id": user_ids[PROVIDER_EMAIL]}
    )

    job_ids = {}
    for days_ago, owner, fields in DEMO_JOB_REQUESTS:
        service = JobRequestService(store, clock=_clock_at(now, days_ago))
        job = service.create({**fields, "user_id": user_ids[owner]})
        job_ids[job.title] = job.id

    accepted = QuoteService(store, clock=_clock_at(now, 6)).submit({
        "job_request_id": job_ids["Skilled Fitters for Construction Project"],
        "provider_id": user_ids[PROVIDER_EMAIL],
        "amount": "₹19,000 per worker",
        "timeline": "6 months",
        "comments": "We can supply 10 skilled fitters and can start immediately.",
    })
    QuoteService(store).update_status(accepted.id, "accepted")
    QuoteService(store, clock=_clock_at(now, 2)).submit({
        "job_request_id": job_ids["Need Welders for Factory Maintenance"],
        "provider_id": user_ids[PROVIDER_EMAIL],
        "amount": "₹22,000 per worker",
        "timeline": "3 months",
        "comments": "We can provide 5 experienced welders with the necessary certifications.",
    })

    summary = {"users": 2, "providers": 1, "job_requests": len(job_ids), "quotes": 2}
    logger.info("Seeded demo data: %s", summary)
    return summary
