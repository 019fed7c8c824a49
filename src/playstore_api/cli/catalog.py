"""CLI: playstore details|bulk-details|suggest|reviews|categories|recommendations|delivery"""

from typing import Optional

import click
from rich.console import Console
from rich.table import Table

from playstore_api.models.options import RecommendationsQuery, ReviewSort, ReviewsQuery

console = Console()

SORTS = {"newest": ReviewSort.NEWEST, "rating": ReviewSort.HIGHRATING, "helpful": ReviewSort.HELPFUL}


def _get_client():
    from playstore_api.cli.main import _get_client
    return _get_client()


def _echo_json(message):
    from playstore_api.cli.main import _echo_json
    _echo_json(message)


def _docs_table(title: str, docs) -> Table:
    table = Table(title=title)
    table.add_column("Package", style="bold")
    table.add_column("Title")
    table.add_column("Creator")
    table.add_column("Rating")
    for doc in docs:
        table.add_row(doc.docid, doc.title, doc.creator, f"{doc.aggregateRating.starRating:.1f}")
    return table


@click.command("details")
@click.argument("package")
@click.option("--json-output", "--json", is_flag=True)
def details_cmd(package: str, json_output: bool):
    """Show details of one app."""
    with _get_client() as client:
        with console.status("Fetching details..."):
            details = client.catalog.details(package)
    if json_output:
        _echo_json(details)
        return
    doc = details.docV2
    app = doc.details.appDetails
    console.print(f"[bold]{doc.title}[/bold] by {doc.creator}")
    console.print(f"Version {app.versionString} ({app.versionCode}), {app.numDownloads} downloads")
    console.print(f"Rating {doc.aggregateRating.starRating:.1f} from {doc.aggregateRating.ratingsCount} ratings")
    if doc.child:
        console.print(_docs_table("Related", doc.child))
    if details.HasField("userReview"):
        console.print(f"[dim]Your review: {details.userReview.starRating}* {details.userReview.comment}[/dim]")


@click.command("bulk-details")
@click.argument("packages", nargs=-1, required=True)
@click.option("--json-output", "--json", is_flag=True)
def bulk_details_cmd(packages: tuple[str, ...], json_output: bool):
    """Show details of several apps."""
    with _get_client() as client:
        with console.status("Fetching details..."):
            response = client.catalog.bulk_details(list(packages))
    if json_output:
        _echo_json(response)
        return
    console.print(_docs_table("Apps", [entry.doc for entry in response.entry if entry.HasField("doc")]))


@click.command("suggest")
@click.argument("query")
@click.option("--json-output", "--json", is_flag=True)
def suggest_cmd(query: str, json_output: bool):
    """Search suggestions for a partial query."""
    with _get_client() as client:
        response = client.catalog.search_suggest(query)
    if json_output:
        _echo_json(response)
        return
    for entry in response.entry:
        if entry.packageNameContainer.packageName:
            console.print(f"[bold]{entry.title}[/bold] ({entry.packageNameContainer.packageName})")
        else:
            console.print(entry.suggestedQuery)


@click.command("reviews")
@click.argument("package")
@click.option("--sort", type=click.Choice(sorted(SORTS)), default="newest")
@click.option("--offset", type=int, default=None)
@click.option("--limit", type=int, default=20)
@click.option("--version-code", type=int, default=None)
@click.option("--json-output", "--json", is_flag=True)
def reviews_cmd(package: str, sort: str, offset: Optional[int], limit: int,
                version_code: Optional[int], json_output: bool):
    """List reviews of an app."""
    query = ReviewsQuery(sort=SORTS[sort], offset=offset, number_of_results=limit, version_code=version_code)
    with _get_client() as client:
        with console.status("Fetching reviews..."):
            response = client.catalog.reviews(package, query)
    if json_output:
        _echo_json(response)
        return
    table = Table(title=f"Reviews ({response.getResponse.matchingCount} total)")
    table.add_column("Stars")
    table.add_column("Author", style="bold")
    table.add_column("Comment")
    for review in response.getResponse.review:
        table.add_row(str(review.starRating), review.authorName, review.comment)
    console.print(table)


@click.command("categories")
@click.argument("category", required=False)
@click.option("--json-output", "--json", is_flag=True)
def categories_cmd(category: Optional[str], json_output: bool):
    """List categories, or subcategories of CATEGORY."""
    with _get_client() as client:
        response = client.catalog.categories(category)
    if json_output:
        _echo_json(response)
        return
    table = Table(title="Categories")
    table.add_column("Name", style="bold")
    table.add_column("URL")
    for link in response.category:
        table.add_row(link.name, link.dataUrl)
    console.print(table)


@click.command("recommendations")
@click.argument("package")
@click.option("--limit", type=int, default=None)
@click.option("--json-output", "--json", is_flag=True)
def recommendations_cmd(package: str, limit: Optional[int], json_output: bool):
    """Apps other users also viewed."""
    with _get_client() as client:
        response = client.catalog.recommendations(package, RecommendationsQuery(number_of_results=limit))
    if json_output:
        _echo_json(response)
        return
    console.print(_docs_table("Also viewed", response.doc))


@click.command("delivery")
@click.argument("package")
@click.argument("version_code", type=int)
@click.option("--offer-type", type=int, default=1)
@click.option("--json-output", "--json", is_flag=True)
def delivery_cmd(package: str, version_code: int, offer_type: int, json_output: bool):
    """Download URL and cookie for an owned app."""
    with _get_client() as client:
        response = client.catalog.delivery(package, version_code, offer_type)
    if json_output:
        _echo_json(response)
        return
    data = response.appDeliveryData
    console.print(f"[bold]{data.downloadUrl}[/bold] ({data.downloadSize} bytes)")
    for cookie in data.downloadAuthCookie:
        console.print(f"[dim]Cookie: {cookie.name}={cookie.value}[/dim]")
