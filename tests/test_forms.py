"""
Tests for django-newsroom forms.
"""
import datetime

from newsroom.forms import BlogSeriesForm, ImageForm, PostAdminForm


def post_data(author, **kwargs):
    data = {
        "title": "Ash defeats Gary in Indigo Plateau",
        "subtitle": "Oak arrives just in time",
        "teaser": "Ash becomes new Pokemon Champion.",
        "body": "<p>{{Image:5}}Pikachu wrecks everyone.</p>",
        "section_path": "News/University",
        "published_at": "1999-11-10 12:00:00",
        "authors": [author.pk],
        "embed_url": "",
    }
    data.update(kwargs)
    return data


class TestPostAdminForm:
    def test_valid(self, author):
        form = PostAdminForm(post_data(author, embed_url="http://www.youtube.com/watch?v=JuYeHPFR3f0"))
        assert form.is_valid(), form.errors

        post = form.save()
        assert post.embed_code == "JuYeHPFR3f0"
        assert post.slug == "1999/11/10/ash-defeats-gary-indigo-plateau"
        assert list(post.authors.all()) == [author]

    def test_authors_required(self, author):
        form = PostAdminForm(post_data(author, authors=[]))
        assert not form.is_valid()
        assert "authors" in form.errors

    def test_unrecognized_embed_url(self, author):
        form = PostAdminForm(post_data(author, embed_url="https://vimeo.com/12345"))
        assert not form.is_valid()
        assert "embed_url" in form.errors

    def test_section_path_normalized(self, author):
        form = PostAdminForm(post_data(author, section_path="/News/University/"))
        assert form.is_valid(), form.errors
        assert form.save().section == ["News", "University"]

    def test_long_teaser(self, author):
        form = PostAdminForm(post_data(author, teaser="Pikachu wrecks everyone. " * 20))
        assert not form.is_valid()
        assert "teaser" in form.errors

    def test_initial_embed_url(self, make_post):
        post = make_post(embed_code="JuYeHPFR3f0")
        form = PostAdminForm(instance=post)
        assert form.fields["embed_url"].initial == "//www.youtube.com/watch?v=JuYeHPFR3f0"

    def test_blank_embed_url_clears_code(self, make_post, author):
        post = make_post(embed_code="JuYeHPFR3f0")
        form = PostAdminForm(post_data(author), instance=post)
        assert form.is_valid(), form.errors
        assert form.save().embed_code == ""


class TestImageForm:
    def test_for_update_keeps_missing_fields(self, image):
        form = ImageForm.for_update(image, {"caption": "A wild Pidgey appeared"})
        assert form.is_valid(), form.errors

        form.save()
        image.refresh_from_db()
        assert image.caption == "A wild Pidgey appeared"
        assert image.credit == "Brock"
        assert image.date == datetime.date(2012, 5, 1)
        assert image.original

    def test_for_update_invalid_date(self, image):
        form = ImageForm.for_update(image, {"date": ""})
        assert not form.is_valid()
        assert "date" in form.errors

    def test_original_required_on_create(self, db):
        form = ImageForm({"caption": "Pidgey", "date": "2012-05-01"})
        assert not form.is_valid()
        assert "original" in form.errors


class TestBlogSeriesForm:
    def test_unique_name_per_blog(self, series):
        form = BlogSeriesForm({"blog": series.blog.pk, "name": series.name})
        assert not form.is_valid()
