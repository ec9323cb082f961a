import click

from .extensions import db
from .log import get_logger
from .models import User

log = get_logger(__name__)

SAMPLE_USERS = [
    ("Rahul Sharma", "rahul@email.com", "hashed_password1", "Manager"),
    ("Sophia Williams", "sophia@email.com", "hashed_password2", "Software Developer"),
    ("Ethan Brown", "ethan@email.com", "hashed_password3", "Engineer"),
    ("Olivia Davis", "olivia@email.com", "hashed_password4", "Doctor"),
    ("Mason Wilson", "mason@email.com", "hashed_password5", "Teacher"),
    ("Isabella Martinez", "isabella@email.com", "hashed_password6", "Postman"),
    ("Liam Thomas", "liam@email.com", "hashed_password7", "Designer"),
    ("Ava White", "ava@email.com", "hashed_password8", "Artist"),
    ("Noah Garcia", "noah@email.com", "hashed_password9", "Cricketer"),
    ("Mia Anderson", "mia@email.com", "hashed_password10", "Football Coach"),
]


def seed_sample_users():
    """Insert the sample users that are not there yet. Returns how many were created."""
    existing = {email for (email,) in db.session.query(User.email).all()}
    created = 0
    for name, email, password_hash, designation in SAMPLE_USERS:
        if email not in existing:
            db.session.add(User(name=name, email=email, password_hash=password_hash, designation=designation))
            created += 1
    if created:
        try:
            db.session.commit()
        except Exception:
            db.session.rollback()
            raise
    log.info("sample_users_seeded", created=created)
    return created


def register_commands(app):
    @app.cli.command("seed-users")
    def seed_users_command():
        """Load the sample users."""
        created = seed_sample_users()
        click.echo(f"Seeded {created} user(s)")
