from datetime import date

from flask import Blueprint, current_app, flash, redirect, render_template, url_for
from marshmallow import ValidationError

from ..errors import PetCareError
from ..validation import describe_errors
from .display import find_by_id
from .forms import CareEventForm, OwnerForm, PetForm, VaccineForm

web_bp = Blueprint("web", __name__, template_folder="../templates")

# view name -> (endpoint, menu label); "home" is the entry state and every
# page links back to it from the navigation bar
VIEWS = {
    "home": ("web.home", "Home"),
    "register-owner": ("web.register_owner", "Register owner"),
    "register-pet": ("web.register_pet", "Register pet"),
    "owner-history": ("web.owner_history", "Owner history"),
    "pet-history": ("web.pet_history", "Pet history"),
}


def _services():
    return current_app.services


def _report_failure(action: str, exc: Exception) -> None:
    if isinstance(exc, ValidationError):
        flash(f"{action}: {describe_errors(exc)}", "danger")
        return
    message = exc.message
    detail = getattr(exc, "detail", None)
    if detail:
        message = f"{message} ({detail})"
    flash(f"{action}: {message}", "danger")


def _pet_or_redirect(pet_id: int):
    try:
        return _services()["pets"].get_pet(pet_id)
    except PetCareError as e:
        _report_failure("Could not open pet", e)
        return None


@web_bp.get("/")
def home():
    return render_template("home.html", view="home")


# ---------------------------------------------------------------- owners


@web_bp.route("/owners/register", methods=["GET", "POST"])
def register_owner():
    owners_service = _services()["owners"]
    form = OwnerForm()
    if form.validate_on_submit():
        try:
            owners_service.create_owner(form.to_payload())
        except (ValidationError, PetCareError) as e:
            _report_failure("Could not register owner", e)
        else:
            flash("Owner registered.", "success")
            return redirect(url_for("web.register_owner"))
    owners = owners_service.list_owners()
    return render_template(
        "owners_register.html", view="register-owner", form=form, owners=owners
    )


@web_bp.route("/owners/<row_id:owner_id>/edit", methods=["GET", "POST"])
def edit_owner(owner_id):
    owners_service = _services()["owners"]
    owner = find_by_id(owners_service.list_owners(), owner_id)
    if owner is None:
        flash("Owner not found.", "warning")
        return redirect(url_for("web.register_owner"))
    form = OwnerForm(data=owner)
    if form.validate_on_submit():
        try:
            owners_service.update_owner(owner_id, form.to_payload())
        except (ValidationError, PetCareError) as e:
            _report_failure("Could not update owner", e)
        else:
            flash("Owner updated.", "success")
            return redirect(url_for("web.register_owner"))
    return render_template(
        "owner_form.html", view="register-owner", form=form, owner=owner
    )


@web_bp.post("/owners/<row_id:owner_id>/delete")
def delete_owner(owner_id):
    try:
        _services()["owners"].delete_owner(owner_id)
    except PetCareError as e:
        _report_failure("Could not delete owner", e)
    else:
        flash("Owner deleted.", "info")
    return redirect(url_for("web.register_owner"))


@web_bp.get("/owners/history")
def owner_history():
    owners = _services()["owners"].list_owners()
    return render_template("owners_history.html", view="owner-history", owners=owners)


# ------------------------------------------------------------------ pets


@web_bp.route("/pets/register", methods=["GET", "POST"])
def register_pet():
    services = _services()
    owners = services["owners"].list_owners()
    form = PetForm()
    form.set_owner_choices(owners)
    if form.validate_on_submit():
        try:
            services["pets"].create_pet(form.to_payload())
        except (ValidationError, PetCareError) as e:
            _report_failure("Could not register pet", e)
        else:
            flash("Pet registered.", "success")
            return redirect(url_for("web.register_pet"))
    pets = services["pets"].list_pets()
    return render_template(
        "pets_register.html", view="register-pet", form=form, pets=pets, owners=owners
    )


@web_bp.route("/pets/<row_id:pet_id>/edit", methods=["GET", "POST"])
def edit_pet(pet_id):
    services = _services()
    pet = _pet_or_redirect(pet_id)
    if pet is None:
        return redirect(url_for("web.register_pet"))
    form = PetForm(data=pet)
    form.set_owner_choices(services["owners"].list_owners())
    if form.validate_on_submit():
        try:
            services["pets"].update_pet(pet_id, form.to_payload())
        except (ValidationError, PetCareError) as e:
            _report_failure("Could not update pet", e)
        else:
            flash("Pet updated.", "success")
            return redirect(url_for("web.register_pet"))
    return render_template("pet_form.html", view="register-pet", form=form, pet=pet)


@web_bp.post("/pets/<row_id:pet_id>/delete")
def delete_pet(pet_id):
    try:
        _services()["pets"].delete_pet(pet_id)
    except PetCareError as e:
        _report_failure("Could not delete pet", e)
    else:
        flash("Pet deleted.", "info")
    return redirect(url_for("web.register_pet"))


@web_bp.get("/pets/history")
def pet_history():
    services = _services()
    pets = services["pets"].list_pets()
    owners = services["owners"].list_owners()
    return render_template(
        "pets_history.html", view="pet-history", pets=pets, owners=owners
    )


# ------------------------------------------------- pet details (vaccines, care)


def _render_details(pet, vaccine_form=None, care_form=None):
    services = _services()
    return render_template(
        "pet_detail.html",
        view="register-pet",
        pet=pet,
        vaccines=services["vaccines"].list_for_pet(pet["id"]),
        care_events=services["care_events"].list_for_pet(pet["id"]),
        vaccine_form=vaccine_form or VaccineForm(prefix="vaccine"),
        care_form=care_form or CareEventForm(prefix="care"),
    )


@web_bp.get("/pets/<row_id:pet_id>")
def pet_detail(pet_id):
    pet = _pet_or_redirect(pet_id)
    if pet is None:
        return redirect(url_for("web.register_pet"))
    return _render_details(pet)


@web_bp.post("/pets/<row_id:pet_id>/vaccines")
def add_vaccine(pet_id):
    pet = _pet_or_redirect(pet_id)
    if pet is None:
        return redirect(url_for("web.register_pet"))
    form = VaccineForm(prefix="vaccine")
    if not form.validate_on_submit():
        flash("Vaccine name and application date are required.", "warning")
        return _render_details(pet, vaccine_form=form)
    try:
        _services()["vaccines"].create_vaccine({**form.to_payload(), "pet_id": pet_id})
    except (ValidationError, PetCareError) as e:
        _report_failure("Could not record vaccine", e)
        return _render_details(pet, vaccine_form=form)
    flash("Vaccine recorded.", "success")
    return redirect(url_for("web.pet_detail", pet_id=pet_id))


@web_bp.route("/pets/<row_id:pet_id>/vaccines/<row_id:vaccine_id>/edit", methods=["GET", "POST"])
def edit_vaccine(pet_id, vaccine_id):
    vaccines_service = _services()["vaccines"]
    vaccine = find_by_id(vaccines_service.list_for_pet(pet_id), vaccine_id)
    if vaccine is None:
        flash("Vaccine not found.", "warning")
        return redirect(url_for("web.pet_detail", pet_id=pet_id))
    form = VaccineForm(
        data={
            "name": vaccine["name"],
            "application_date": date.fromisoformat(vaccine["application_date"]),
        }
    )
    if form.validate_on_submit():
        try:
            vaccines_service.update_vaccine(vaccine_id, form.to_payload())
        except (ValidationError, PetCareError) as e:
            _report_failure("Could not update vaccine", e)
        else:
            flash("Vaccine updated.", "success")
            return redirect(url_for("web.pet_detail", pet_id=pet_id))
    return render_template(
        "record_form.html",
        view="register-pet",
        form=form,
        pet_id=pet_id,
        title=f"Edit vaccine {vaccine['name']}",
    )


@web_bp.post("/pets/<row_id:pet_id>/vaccines/<row_id:vaccine_id>/delete")
def delete_vaccine(pet_id, vaccine_id):
    try:
        _services()["vaccines"].delete_vaccine(vaccine_id)
    except PetCareError as e:
        _report_failure("Could not delete vaccine", e)
    else:
        flash("Vaccine deleted.", "info")
    return redirect(url_for("web.pet_detail", pet_id=pet_id))


@web_bp.post("/pets/<row_id:pet_id>/care-events")
def add_care_event(pet_id):
    pet = _pet_or_redirect(pet_id)
    if pet is None:
        return redirect(url_for("web.register_pet"))
    form = CareEventForm(prefix="care")
    if not form.validate_on_submit():
        flash("Care type and date are required.", "warning")
        return _render_details(pet, care_form=form)
    try:
        _services()["care_events"].create_care_event({**form.to_payload(), "pet_id": pet_id})
    except (ValidationError, PetCareError) as e:
        _report_failure("Could not record care event", e)
        return _render_details(pet, care_form=form)
    flash("Care event recorded.", "success")
    return redirect(url_for("web.pet_detail", pet_id=pet_id))


@web_bp.route("/pets/<row_id:pet_id>/care-events/<row_id:event_id>/edit", methods=["GET", "POST"])
def edit_care_event(pet_id, event_id):
    care_service = _services()["care_events"]
    event = find_by_id(care_service.list_for_pet(pet_id), event_id)
    if event is None:
        flash("Care event not found.", "warning")
        return redirect(url_for("web.pet_detail", pet_id=pet_id))
    form = CareEventForm(
        data={
            "type": event["type"],
            "description": event["description"],
            "date": date.fromisoformat(event["date"]),
        }
    )
    if form.validate_on_submit():
        try:
            care_service.update_care_event(event_id, form.to_payload())
        except (ValidationError, PetCareError) as e:
            _report_failure("Could not update care event", e)
        else:
            flash("Care event updated.", "success")
            return redirect(url_for("web.pet_detail", pet_id=pet_id))
    return render_template(
        "record_form.html",
        view="register-pet",
        form=form,
        pet_id=pet_id,
        title=f"Edit care event {event['type']}",
    )


@web_bp.post("/pets/<row_id:pet_id>/care-events/<row_id:event_id>/delete")
def delete_care_event(pet_id, event_id):
    try:
        _services()["care_events"].delete_care_event(event_id)
    except PetCareError as e:
        _report_failure("Could not delete care event", e)
    else:
        flash("Care event deleted.", "info")
    return redirect(url_for("web.pet_detail", pet_id=pet_id))
