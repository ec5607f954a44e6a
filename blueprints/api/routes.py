"""
API Routes - Portfolio submissions, portfolio lookups and contact messages
"""

from flask import current_app, jsonify, request
from extensions import get_storage
from schemas import validate_portfolio, validate_contact_form
from utils.decorators import handle_errors
from utils.errors import NotFoundError
from utils.helpers import parse_identifier
from . import api_bp


def _json_body():
    """Request JSON, or an empty object when the body is missing or unparseable"""
    body = request.get_json(silent=True)
    return {} if body is None else body


@api_bp.route('/portfolio', methods=['POST'])
@handle_errors('Failed to save portfolio')
def save_portfolio():
    """Validate and store a portfolio submission"""
    portfolio_data = validate_portfolio(_json_body())

    portfolio = get_storage().save_portfolio(portfolio_data)
    current_app.logger.info(f"Portfolio saved, portfolio_id: {portfolio.id}")

    return jsonify({
        'message': 'Portfolio saved successfully',
        'portfolioId': portfolio.id
    }), 201


@api_bp.route('/portfolio/<portfolio_id>')
@handle_errors('Failed to retrieve portfolio')
def get_portfolio(portfolio_id):
    """Return the stored PortfolioData for an id"""
    portfolio_id = parse_identifier(portfolio_id, 'portfolio ID')

    portfolio = get_storage().get_portfolio(portfolio_id)
    if portfolio is None:
        raise NotFoundError('Portfolio not found')

    return jsonify(portfolio.data.to_dict())


@api_bp.route('/contact', methods=['POST'])
@handle_errors('Failed to send message')
def contact():
    """Store a contact message sent to a portfolio"""
    body = _json_body()
    contact_data = validate_contact_form(body)
    portfolio_id = parse_identifier(body.get('portfolioId'), 'portfolio ID')

    storage = get_storage()
    if storage.get_portfolio(portfolio_id) is None:
        if current_app.config.get('CONTACT_REQUIRE_EXISTING_PORTFOLIO'):
            raise NotFoundError('Portfolio not found')
        current_app.logger.warning(f"Contact message for unknown portfolio_id: {portfolio_id}")

    contact_message = storage.save_contact_message(contact_data, portfolio_id)
    current_app.logger.info(
        f"Contact message saved for portfolio_id: {portfolio_id}, contact_id: {contact_message.id}")

    return jsonify({
        'message': 'Message sent successfully',
        'contactId': contact_message.id
    }), 201


@api_bp.route('/projects')
@handle_errors('Failed to fetch projects')
def projects():
    """Placeholder until projects are pulled from an external source such as GitHub"""
    return jsonify({
        'message': 'Projects data endpoint ready for integration with GitHub API',
        'note': 'Projects are currently managed as part of the portfolio data'
    })
