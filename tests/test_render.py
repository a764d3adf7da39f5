"""test suite for terminal rendering."""
import pytest
import sys
from io import StringIO
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from rich.console import Console

from matrimoni.domain.models import Profile, ProfileListing, User
from matrimoni.ui.render import greeting, render_errors, render_profile, render_profiles, toast


class TestRender:
    @pytest.fixture
    def console(self):
        return Console(file=StringIO(), width=200, color_system=None)

    def output(self, console):
        return console.file.getvalue()

    def test_greeting(self):
        assert greeting(User(id=1, name="Alice", email="a@x.com", password="pw")) == "Hi, Alice"
        assert greeting(None) == "Hi"

    def test_empty_listing(self, console):
        render_profiles(console, [])
        assert "No profiles saved yet." in self.output(console)

    def test_listing_shows_owner(self, console, make_form):
        listings = [
            ProfileListing(profile=Profile(id="p1", owner_email="a@x.com", **make_form()), is_owner=True),
            ProfileListing(
                profile=Profile(id="p2", owner_email="b@x.com", **make_form(name="Rahul Verma")),
                posted_by="Bob",
            ),
        ]
        render_profiles(console, listings)
        out = self.output(console)
        assert "Priya Sharma" in out
        assert "Analyst • Mumbai" in out
        assert "you" in out
        assert "Bob" in out

    def test_markup_in_values_is_escaped(self, console, make_form):
        profile = Profile(id="p1", owner_email="a@x.com", **make_form(name="[bold]Priya[/bold]"))
        render_profiles(console, [ProfileListing(profile=profile, posted_by="Alice")])
        assert "[bold]Priya[/bold]" in self.output(console)

    def test_render_profile(self, console, make_form):
        render_profile(console, Profile(id="p1", owner_email="a@x.com", **make_form()), posted_by="Alice")
        out = self.output(console)
        assert "Date of birth:" in out
        assert "1995-04-12" in out
        assert "Posted by:" in out

    def test_toast_and_errors(self, console):
        toast(console, "Profile added.")
        render_errors(console, ["name is required.", "Invalid email address."])
        out = self.output(console)
        assert "✓ Profile added." in out
        assert "Error: name is required." in out
        assert "Error: Invalid email address." in out


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
